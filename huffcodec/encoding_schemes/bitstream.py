from typing import Dict, Optional

from huffcodec.encoding_schemes.errors import ContractViolation, FormatError
from huffcodec.encoding_schemes.tree import HuffmanNode


def encode_bits(data: bytes, codes: Dict[int, str]) -> str:
    """Concatenate the code of every input byte, in input order."""
    try:
        return "".join(codes[byte] for byte in data)
    except KeyError as exc:
        raise ContractViolation(f"byte {exc.args[0]} has no code in the table") from None


def decode_bits(bits: str, root: Optional[HuffmanNode]) -> bytes:
    """
    Walk the tree once per symbol: '0' goes left, '1' goes right, a leaf
    emits its byte and restarts at the root.

    A single-leaf tree is read with its one-bit code "0".
    """
    if root is None:
        raise ContractViolation("cannot decode without a tree")

    out = bytearray()

    if root.is_leaf:
        for pos, bit in enumerate(bits):
            if bit != "0":
                raise FormatError(f"invalid payload bit {bit!r} at position {pos}")
            out.append(root.symbol)
        return bytes(out)

    node = root
    for pos, bit in enumerate(bits):
        if bit == "0":
            node = node.left
        elif bit == "1":
            node = node.right
        else:
            raise FormatError(f"invalid payload bit {bit!r} at position {pos}")

        if node.is_leaf:
            out.append(node.symbol)
            node = root

    if node is not root:
        raise FormatError("payload ends in the middle of a code")

    return bytes(out)
