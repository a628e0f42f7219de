from pathlib import Path
from typing import Optional

from huffcodec.encoding_schemes import huffman_decode, huffman_encode
from huffcodec.pipeline.config import CodecConfig
from huffcodec.utils.file_utils import read_file, write_file


def _target(out_path, default_name: str, cfg: CodecConfig) -> Path:
    if out_path:
        return Path(out_path)
    return Path(cfg.output_dir) / default_name


def encode_file(in_path, out_path=None, cfg: Optional[CodecConfig] = None) -> Path:
    """
    Encode `in_path` and write the artifact.
    Without `out_path` the artifact goes to `<cfg.output_dir>/<cfg.encoded_name>`.
    """
    if cfg is None:
        cfg = CodecConfig()
    data = read_file(in_path)
    target = _target(out_path, cfg.encoded_name, cfg)
    write_file(target, huffman_encode(data))
    return target


def decode_file(in_path, out_path=None, cfg: Optional[CodecConfig] = None) -> Path:
    """
    Decode the artifact at `in_path` and write the original bytes.
    Without `out_path` the result goes to `<cfg.output_dir>/<cfg.decoded_name>`.
    """
    if cfg is None:
        cfg = CodecConfig()
    artifact = read_file(in_path)
    target = _target(out_path, cfg.decoded_name, cfg)
    write_file(target, huffman_decode(artifact))
    return target
