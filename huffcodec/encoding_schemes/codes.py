from typing import Dict, List, Optional, Tuple

from huffcodec.encoding_schemes.errors import ContractViolation
from huffcodec.encoding_schemes.tree import HuffmanNode

SINGLE_LEAF_CODE = "0"


def build_codes(root: Optional[HuffmanNode]) -> Dict[int, str]:
    """
    Walk the tree and map every leaf symbol to its bit-string code.

    Going left appends '0', going right appends '1'. A tree that is a single
    leaf would give its symbol the empty code, which can neither be written
    nor read back, so that symbol gets "0" instead.
    """
    if root is None:
        raise ContractViolation("cannot derive codes without a tree")

    if root.is_leaf:
        return {root.symbol: SINGLE_LEAF_CODE}

    codes: Dict[int, str] = {}
    stack: List[Tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = prefix
            continue
        # right first so the left subtree is visited first
        stack.append((node.right, prefix + "1"))
        stack.append((node.left, prefix + "0"))

    return dict(sorted(codes.items()))


def is_prefix_free(codes: Dict[int, str]) -> bool:
    """True if no code in the table is a prefix of another one."""
    ordered = sorted(codes.values())
    # after sorting, a prefix always sits right before one of its extensions
    return all(not b.startswith(a) for a, b in zip(ordered, ordered[1:]))
