"""
Textual frequency header framed by the ``het`` sentinel.

Layout::

    het\\n
    <symbol byte><SP><decimal count>\\n     (one line per symbol, ascending)
    het\\n
    <payload>

Only the frequency table is stored; the decoder rebuilds the tree from it.

The framing is not escaped. An entry always has whitespace as its second
byte, so a real entry for the symbol ``h`` is never mistaken for the closing
sentinel, but a damaged artifact can still be misread rather than rejected.
"""

from typing import Dict, Tuple

from huffcodec.encoding_schemes.errors import FormatError

SENTINEL = b"het"
_WHITESPACE = b" \t\n\r\x0b\x0c"
_DIGITS = b"0123456789"


def _is_space(byte: int) -> bool:
    return byte in _WHITESPACE


def _show(symbol: int) -> str:
    return repr(bytes([symbol]))[2:-1]


def serialize_header(freqs: Dict[int, int]) -> bytes:
    """Write the sentinel-framed header for a frequency table."""
    out = bytearray(SENTINEL + b"\n")
    for symbol in sorted(freqs):
        out.append(symbol)
        out += b" "
        out += str(freqs[symbol]).encode("ascii")
        out += b"\n"
    out += SENTINEL + b"\n"
    return bytes(out)


def parse_header(artifact: bytes) -> Tuple[Dict[int, int], int]:
    """
    Read the frequency table back from the start of an encoded artifact.

    Returns the table and the offset where the payload starts.
    """
    size = len(artifact)
    if size < 4 or artifact[:3] != SENTINEL or not _is_space(artifact[3]):
        raise FormatError("input is not a recognized encoded artifact")

    freqs: Dict[int, int] = {}
    i = 4
    while True:
        if i >= size:
            raise FormatError("header ended before the closing sentinel")

        if artifact[i:i + 3] == SENTINEL:
            i += 3
            if i < size:
                if not _is_space(artifact[i]):
                    raise FormatError("closing sentinel is not followed by a line break")
                i += 1
            break

        symbol = artifact[i]
        if i + 1 >= size or not _is_space(artifact[i + 1]):
            raise FormatError(f"invalid encoded symbol: expected space after '{_show(symbol)}'")
        i += 2

        start = i
        while i < size and artifact[i] in _DIGITS:
            i += 1
        if i == start:
            raise FormatError(f"invalid frequency for symbol '{_show(symbol)}'")
        if i >= size or artifact[i] != ord("\n"):
            raise FormatError(f"frequency for symbol '{_show(symbol)}' is not terminated by a newline")

        if symbol in freqs:
            raise FormatError(f"symbol '{_show(symbol)}' appears twice in the header")
        freqs[symbol] = int(artifact[start:i])
        i += 1

    return dict(sorted(freqs.items())), i
