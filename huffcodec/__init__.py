"""Huffman coding of single-byte symbols with a self-describing text header."""

from huffcodec.encoding_schemes import huffman_decode, huffman_encode

__version__ = "0.1.0"

__all__ = ["huffman_decode", "huffman_encode", "__version__"]
