"""
Exceptions raised by the Huffman codec.

Format errors describe a bad encoded artifact (user input). Contract
violations describe a caller bug, e.g. building a tree from nothing.
"""


class HuffmanError(Exception):
    """Base class for all codec errors."""


class FormatError(HuffmanError, ValueError):
    """The input is not a well-formed encoded artifact."""


class ContractViolation(HuffmanError, RuntimeError):
    """The codec was called in a way it never supports."""


class EmptyTreeError(ContractViolation):
    def __init__(self, message: str = "cannot build a tree from no symbols") -> None:
        super().__init__(message)


class FileIOError(HuffmanError, OSError):
    """A file could not be opened for reading or writing."""

    def __init__(self, path, action: str, reason: str = "") -> None:
        self.path = str(path)
        message = f'Can not open "{self.path}" for {action}'
        if reason:
            message += f": {reason}"
        super().__init__(message)
