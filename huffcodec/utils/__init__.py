"""Utility helpers shared across pipeline components."""

from huffcodec.utils.file_utils import (
    add_suffix_to_top_level,
    read_file,
    suffix_filename,
    write_file,
)
from huffcodec.utils.bits_bytes_utils import bytes_to_bitstring, packed_size

__all__ = [
    "add_suffix_to_top_level",
    "read_file",
    "suffix_filename",
    "write_file",
    "bytes_to_bitstring",
    "packed_size",
]
