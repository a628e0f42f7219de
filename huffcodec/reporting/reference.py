from dataclasses import dataclass

from dahuffman import HuffmanCodec

from huffcodec.utils.bits_bytes_utils import bytes_to_bitstring


@dataclass
class ReferenceEncoded:
    """
    Output of the `dahuffman` reference codec for the same input.

    - bits: packed output unpacked to a bit string (includes EOF and padding)
    - codec: HuffmanCodec that produced `bits`
    """
    bits: str
    codec: HuffmanCodec

    @property
    def size_bytes(self) -> int:
        return len(self.bits) // 8


def reference_encode(data: bytes) -> ReferenceEncoded:
    codec = HuffmanCodec.from_data(data)
    return ReferenceEncoded(bits=bytes_to_bitstring(codec.encode(data)), codec=codec)
