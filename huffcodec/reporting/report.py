from __future__ import annotations

import csv
import dataclasses
import json
import statistics
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from huffcodec.encoding_schemes import analyze
from huffcodec.pipeline.config import CodecConfig
from huffcodec.reporting.reference import reference_encode
from huffcodec.utils.batch import decoded_path_for, encoded_path_for
from huffcodec.utils.bits_bytes_utils import packed_size
from huffcodec.utils.file_utils import read_file

REPORT_COLUMNS = [
    "input_path",
    "status",
    "original_size_bytes",
    "distinct_symbols",
    "header_size_bytes",
    "payload_bits",
    "encoded_size_bytes",
    "packed_payload_bytes",
    "compression_ratio",
    "reference_size_bytes",
    "decoded_size_bytes",
    "success",
]


def _iter_files(root: Path) -> Iterable[Path]:
    return sorted(p for p in root.rglob("*") if p.is_file())


def _format_csv_value(value: object) -> object:
    if value is None:
        return ""
    return value


def _file_row(input_file: Path, input_root: Path, output_root: Path, cfg: CodecConfig) -> Dict[str, object]:
    rel_path = input_file.relative_to(input_root)
    row: Dict[str, object] = {key: None for key in REPORT_COLUMNS}
    row["input_path"] = str(rel_path)
    row["status"] = "ok"

    original_bytes = read_file(input_file)
    row["original_size_bytes"] = len(original_bytes)
    if not original_bytes:
        row["status"] = "empty"
        row["success"] = False
        return row

    encoded = analyze(original_bytes)
    encoded_size = len(encoded.header) + len(encoded.bits)
    packed_bytes = packed_size(encoded.bits)
    row["distinct_symbols"] = len(encoded.freqs)
    row["header_size_bytes"] = len(encoded.header)
    row["payload_bits"] = len(encoded.bits)
    row["encoded_size_bytes"] = encoded_size
    row["packed_payload_bytes"] = packed_bytes
    # ratio of the packed payload against the original, header excluded
    row["compression_ratio"] = packed_bytes / len(original_bytes)
    row["reference_size_bytes"] = reference_encode(original_bytes).size_bytes

    decoded_path = decoded_path_for(rel_path.parent, rel_path.name, output_root / "out_decoded", cfg)
    encoded_path = encoded_path_for(rel_path.parent, rel_path.name, output_root / "out_encoded", cfg)
    if decoded_path.exists():
        decoded_bytes = read_file(decoded_path)
        row["decoded_size_bytes"] = len(decoded_bytes)
        row["success"] = decoded_bytes == original_bytes
    else:
        row["success"] = False
        row["status"] = "missing_decoded"

    if encoded_path.exists():
        row["encoded_size_bytes"] = encoded_path.stat().st_size

    return row


def generate_report(
    input_root: Path,
    output_root: Path,
    report_dir: Path,
    formats: Optional[Sequence[str]] = None,
    cfg: Optional[CodecConfig] = None,
) -> Dict[str, object]:
    """
    Compare batch outputs against their inputs and summarize compression.

    Expects the `out_encoded` / `out_decoded` layout written by
    `run_batch_on_folder`.
    """
    if cfg is None:
        cfg = CodecConfig()
    if formats is not None:
        cfg = dataclasses.replace(cfg, report_formats=tuple(formats))

    input_root = input_root.resolve()
    output_root = output_root.resolve()
    report_dir = report_dir.resolve()

    rows: List[Dict[str, object]] = [
        _file_row(input_file, input_root, output_root, cfg) for input_file in _iter_files(input_root)
    ]

    measured = [row for row in rows if row["compression_ratio"] is not None]
    ratios = [row["compression_ratio"] for row in measured]
    success_count = sum(1 for row in rows if row["success"])

    summary = {
        "total_files": len(rows),
        "success_count": success_count,
        "success_rate": (success_count / len(rows)) if rows else 0.0,
        "total_original_bytes": sum(row["original_size_bytes"] for row in rows),
        "total_payload_bits": sum(row["payload_bits"] for row in measured),
        "total_reference_bytes": sum(row["reference_size_bytes"] for row in measured),
        "avg_compression_ratio": statistics.mean(ratios) if ratios else 0.0,
        "median_compression_ratio": statistics.median(ratios) if ratios else 0.0,
    }

    meta = {
        "input_root": str(input_root),
        "output_root": str(output_root),
        "report_dir": str(report_dir),
        "generated_at_utc": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }

    report_dir.mkdir(parents=True, exist_ok=True)
    formats = cfg.report_formats

    if "csv" in formats:
        csv_path = report_dir / "report.csv"
        with csv_path.open("w", newline="", encoding="utf-8") as csv_file:
            writer = csv.DictWriter(csv_file, fieldnames=REPORT_COLUMNS)
            writer.writeheader()
            for row in rows:
                writer.writerow({k: _format_csv_value(row.get(k)) for k in REPORT_COLUMNS})

    if "json" in formats:
        json_path = report_dir / "report.json"
        report_payload = {"meta": meta, "summary": summary, "files": rows}
        json_path.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")

    return {"meta": meta, "summary": summary, "files": rows}
