"""Huffman codec: frequency table, tree, codes, header and bitstream."""

from huffcodec.encoding_schemes.errors import (
    ContractViolation,
    EmptyTreeError,
    FileIOError,
    FormatError,
    HuffmanError,
)
from huffcodec.encoding_schemes.huffman import (
    HuffmanEncoded,
    analyze,
    huffman_decode,
    huffman_encode,
)

__all__ = [
    "ContractViolation",
    "EmptyTreeError",
    "FileIOError",
    "FormatError",
    "HuffmanError",
    "HuffmanEncoded",
    "analyze",
    "huffman_decode",
    "huffman_encode",
]
