import os
from pathlib import Path
from typing import Dict, List

from huffcodec.encoding_schemes import HuffmanError, huffman_decode, huffman_encode
from huffcodec.pipeline.config import CodecConfig
from huffcodec.utils.file_utils import (
    add_suffix_to_top_level,
    read_file,
    suffix_filename,
    write_file,
)


def encoded_path_for(rel_root: Path, name: str, out_encoded_root: Path, cfg: CodecConfig) -> Path:
    encoded_rel_dir = add_suffix_to_top_level(rel_root, cfg.encoded_suffix)
    encoded_rel_file = suffix_filename(Path(name), cfg.encoded_suffix)
    return out_encoded_root / encoded_rel_dir / encoded_rel_file.name


def decoded_path_for(rel_root: Path, name: str, out_decoded_root: Path, cfg: CodecConfig) -> Path:
    decoded_rel_dir = add_suffix_to_top_level(rel_root, cfg.decoded_suffix)
    decoded_rel_file = suffix_filename(Path(name), cfg.decoded_suffix)
    return out_decoded_root / decoded_rel_dir / decoded_rel_file.name


def run_batch_on_folder(
    input_root: Path,
    output_root: Path,
    cfg: CodecConfig | None = None,
) -> List[Dict[str, object]]:
    """
    Encode then decode every file below `input_root`.

    Artifacts land in `<output_root>/out_encoded`, reconstructions in
    `<output_root>/out_decoded`, both mirroring the input tree. A file that
    fails is recorded with status "error" and the batch carries on.
    """
    if cfg is None:
        cfg = CodecConfig()

    input_root = Path(input_root).resolve()
    output_root = Path(output_root).resolve()

    out_encoded_root = output_root / "out_encoded"
    out_decoded_root = output_root / "out_decoded"

    results: List[Dict[str, object]] = []
    for root, _, files in os.walk(input_root):
        root_path = Path(root)
        rel_root = root_path.relative_to(input_root)

        for filename in sorted(files):
            in_path = root_path / filename
            print("Processing:", in_path)
            results.append(
                process_file(
                    in_path=in_path,
                    rel_root=rel_root,
                    out_encoded_root=out_encoded_root,
                    out_decoded_root=out_decoded_root,
                    cfg=cfg,
                )
            )

    return results


def process_file(
    in_path: Path,
    rel_root: Path,
    out_encoded_root: Path,
    out_decoded_root: Path,
    cfg: CodecConfig,
) -> Dict[str, object]:
    result: Dict[str, object] = {"input_path": str(in_path), "status": "ok", "message": ""}

    try:
        data = read_file(in_path)
        if not data:
            print("Skipping empty file:", in_path)
            result["status"] = "skipped"
            return result

        artifact = huffman_encode(data)
        encoded_out_path = encoded_path_for(rel_root, in_path.name, out_encoded_root, cfg)
        encoded_out_path.parent.mkdir(parents=True, exist_ok=True)
        write_file(encoded_out_path, artifact)
        print("Encoded output:", encoded_out_path)

        # Decode the artifact as written to disk.
        decoded_bytes = huffman_decode(read_file(encoded_out_path))
        if cfg.verify_roundtrip and decoded_bytes != data:
            raise HuffmanError(f"round trip mismatch for {in_path}")

        decoded_out_path = decoded_path_for(rel_root, in_path.name, out_decoded_root, cfg)
        decoded_out_path.parent.mkdir(parents=True, exist_ok=True)
        write_file(decoded_out_path, decoded_bytes)
        print("Decoded output:", decoded_out_path)
    except HuffmanError as exc:
        print(f"Failed on {in_path}: {exc}")
        result["status"] = "error"
        result["message"] = str(exc)

    return result
