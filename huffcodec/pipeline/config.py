from dataclasses import dataclass
from typing import Tuple

REPORT_FORMATS = {"csv", "json"}


@dataclass
class CodecConfig:
    """
    Configuration for the file-level encode/decode pipeline.
    """
    output_dir: str = "."
    encoded_name: str = "encoded.txt"
    decoded_name: str = "decoded.txt"
    # Batch runs mirror the input tree and tag names with these suffixes.
    encoded_suffix: str = "_encoded"
    decoded_suffix: str = "_decoded"
    verify_roundtrip: bool = False
    report_formats: Tuple[str, ...] = ("csv", "json")

    def __post_init__(self) -> None:
        if not self.encoded_name or not self.decoded_name:
            raise ValueError("Output file names must not be empty.")
        if self.encoded_suffix == self.decoded_suffix:
            raise ValueError("encoded_suffix and decoded_suffix must differ.")
        self.report_formats = tuple(fmt.lower() for fmt in self.report_formats)
        unknown = set(self.report_formats) - REPORT_FORMATS
        if unknown:
            raise ValueError(f"Unsupported report format: {', '.join(sorted(unknown))}")
