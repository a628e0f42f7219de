"""
Huffman tree construction.

Nodes are merged through a min-heap keyed on ``(freq, tiebreak)``:

- leaves use their byte value as tiebreak, so among equal frequencies the
  lower byte is popped first;
- internal nodes use ``256 + creation_index``, so at equal frequency every
  leaf comes before every internal node, and older internal nodes before
  newer ones.

The key is unique per heap entry, which makes the tree a pure function of
the frequency table. The decoder rebuilds exactly the encoder's tree from
the header alone.
"""

import heapq
import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from huffcodec.encoding_schemes.errors import EmptyTreeError

# Debug logging controlled by environment variable HUFF_DEBUG
_DEBUG = os.environ.get("HUFF_DEBUG", "").lower() in {"1", "true", "yes"}

INTERNAL_TIEBREAK_BASE = 256


def _dbg(msg: str) -> None:
    if _DEBUG:
        print(f"[HUFF] {msg}", file=sys.stderr)


@dataclass
class HuffmanNode:
    """
    One node of a Huffman tree.

    - symbol: byte value for a leaf, None for an internal node
    - left / right: children of an internal node (both set), None for a leaf
    """
    freq: int
    symbol: Optional[int] = None
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_tree(freqs: Dict[int, int]) -> HuffmanNode:
    """
    Build the Huffman tree for a frequency table.

    A table with a single entry yields a tree made of that one leaf.
    """
    if not freqs:
        raise EmptyTreeError()

    heap: List[Tuple[int, int, HuffmanNode]] = [
        (freq, symbol, HuffmanNode(freq=freq, symbol=symbol))
        for symbol, freq in freqs.items()
    ]
    heapq.heapify(heap)

    serial = INTERNAL_TIEBREAK_BASE
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = HuffmanNode(freq=left.freq + right.freq, left=left, right=right)
        heapq.heappush(heap, (merged.freq, serial, merged))
        serial += 1

    root = heap[0][2]
    _dbg(f"tree built: {len(freqs)} leaves, {serial - INTERNAL_TIEBREAK_BASE} merges, total={root.freq}")
    return root
