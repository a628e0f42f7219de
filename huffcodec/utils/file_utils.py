from pathlib import Path
from typing import Union

from huffcodec.encoding_schemes.errors import FileIOError

PathLike = Union[str, Path]


def read_file(path: PathLike) -> bytes:
    """Read a whole file into memory."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise FileIOError(path, "reading", exc.strerror or str(exc)) from exc


def write_file(path: PathLike, data: bytes) -> None:
    """Write `data` to `path`, replacing any previous content."""
    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        raise FileIOError(path, "writing", exc.strerror or str(exc)) from exc


def add_suffix_to_top_level(rel_path: Path, suffix: str) -> Path:
    """
    Add a suffix to the top-level directory name of a relative path.

    Example:
        'logs/2024/app.log'
        + '_encoded'
        -> 'logs_encoded/2024/app.log'
    """
    parts = list(rel_path.parts)
    if not parts:
        return Path()
    parts[0] = parts[0] + suffix
    return Path(*parts)


def suffix_filename(path: Path, suffix: str) -> Path:
    """
    Add a suffix before the file extension.

    Example:
        notes.txt + '_encoded' -> notes_encoded.txt
        README    + '_decoded' -> README_decoded
    """
    if path.suffix:
        return path.with_name(path.stem + suffix + path.suffix)
    return path.with_name(path.name + suffix)
