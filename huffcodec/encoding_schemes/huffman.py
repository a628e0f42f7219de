import os
import sys
from dataclasses import dataclass
from typing import Dict

from huffcodec.encoding_schemes.bitstream import decode_bits, encode_bits
from huffcodec.encoding_schemes.codes import build_codes
from huffcodec.encoding_schemes.errors import FormatError
from huffcodec.encoding_schemes.frequency import count_frequencies
from huffcodec.encoding_schemes.header import parse_header, serialize_header
from huffcodec.encoding_schemes.tree import HuffmanNode, build_tree

# Debug logging controlled by environment variable HUFF_DEBUG
_DEBUG = os.environ.get("HUFF_DEBUG", "").lower() in {"1", "true", "yes"}


def _dbg(msg: str) -> None:
    if _DEBUG:
        print(f"[HUFF] {msg}", file=sys.stderr)


@dataclass
class HuffmanEncoded:
    """
    Container for Huffman-encoded data.

    - freqs: byte value -> count, ascending by byte value
    - root: tree rebuilt from `freqs`
    - codes: byte value -> bit string (e.g. '010')
    - bits: encoded payload bit string (e.g. '010101...')
    - header: serialized, sentinel-framed frequency table
    """
    freqs: Dict[int, int]
    root: HuffmanNode
    codes: Dict[int, str]
    bits: str
    header: bytes

    def to_bytes(self) -> bytes:
        return self.header + self.bits.encode("ascii")


def analyze(data: bytes) -> HuffmanEncoded:
    """
    Run every encoding stage on `data` and keep the intermediate results.

    Raises EmptyTreeError for empty input.
    """
    freqs = count_frequencies(data)
    root = build_tree(freqs)
    codes = build_codes(root)
    bits = encode_bits(data, codes)
    return HuffmanEncoded(
        freqs=freqs,
        root=root,
        codes=codes,
        bits=bits,
        header=serialize_header(freqs),
    )


def huffman_encode(data: bytes) -> bytes:
    """Encode raw bytes into a self-describing artifact."""
    encoded = analyze(data)
    _dbg(f"encoded {len(data)} bytes into {len(encoded.bits)} bits, {len(encoded.codes)} symbols")
    return encoded.to_bytes()


def huffman_decode(artifact: bytes) -> bytes:
    """
    Decode an artifact produced by `huffman_encode` back to the original bytes.

    """
    freqs, offset = parse_header(artifact)
    if not freqs:
        raise FormatError("header lists no symbols")

    root = build_tree(freqs)
    bits = artifact[offset:].decode("latin-1")
    decoded = decode_bits(bits, root)

    if len(decoded) != root.freq:
        raise FormatError(
            f"payload decodes to {len(decoded)} bytes, header announces {root.freq}"
        )
    _dbg(f"decoded {len(bits)} bits into {len(decoded)} bytes")
    return decoded
