def bytes_to_bitstring(data: bytes) -> str:
    """Convert bytes -> bitstring (8 bits per byte)."""
    return "".join(f"{byte:08b}" for byte in data)


def packed_size(bits: str) -> int:
    """Number of bytes needed to store `bits` packed eight to a byte."""
    return (len(bits) + 7) // 8
