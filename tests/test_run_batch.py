import json
from pathlib import Path

import pytest

from huffcodec.pipeline import CodecConfig, decode_file, encode_file, run_batch_on_folder
from huffcodec.encoding_schemes import FileIOError
from huffcodec.reporting.report import REPORT_COLUMNS, generate_report
from huffcodec.utils.file_utils import add_suffix_to_top_level, suffix_filename


@pytest.fixture
def input_tree(tmp_path):
    root = tmp_path / "data"
    (root / "logs" / "2024").mkdir(parents=True)
    (root / "logs" / "app.log").write_bytes(b"INFO start\nINFO ok\nWARN slow\n" * 20)
    (root / "logs" / "2024" / "blob.bin").write_bytes(bytes(range(256)) * 3)
    (root / "empty.txt").write_bytes(b"")
    return root


def test_suffix_helpers():
    assert add_suffix_to_top_level(Path("logs/2024/app.log"), "_encoded") == Path("logs_encoded/2024/app.log")
    assert add_suffix_to_top_level(Path("."), "_encoded") == Path()
    assert suffix_filename(Path("notes.txt"), "_decoded") == Path("notes_decoded.txt")
    assert suffix_filename(Path("README"), "_decoded") == Path("README_decoded")


def test_encode_decode_file_defaults(tmp_path):
    src = tmp_path / "input.txt"
    src.write_bytes(b"hello huffman")
    cfg = CodecConfig(output_dir=str(tmp_path))

    encoded = encode_file(src, cfg=cfg)
    assert encoded == tmp_path / "encoded.txt"
    assert encoded.read_bytes().startswith(b"het\n")

    decoded = decode_file(encoded, cfg=cfg)
    assert decoded == tmp_path / "decoded.txt"
    assert decoded.read_bytes() == b"hello huffman"


def test_missing_input_names_path(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(FileIOError) as excinfo:
        encode_file(missing, tmp_path / "out.txt")
    assert str(missing) in str(excinfo.value)
    assert isinstance(excinfo.value, OSError)


def test_config_has_no_sentinel_setting():
    # the header framing is fixed, so it is not a config field
    with pytest.raises(TypeError):
        CodecConfig(sentinel="het")


def test_config_rejects_bad_report_format():
    with pytest.raises(ValueError):
        CodecConfig(report_formats=("xml",))


def test_run_batch_mirrors_tree(input_tree, tmp_path, capsys):
    out_root = tmp_path / "out"
    results = run_batch_on_folder(input_tree, out_root, CodecConfig(verify_roundtrip=True))

    statuses = {Path(r["input_path"]).name: r["status"] for r in results}
    assert statuses == {"empty.txt": "skipped", "app.log": "ok", "blob.bin": "ok"}

    encoded = out_root / "out_encoded" / "logs_encoded" / "app_encoded.log"
    decoded = out_root / "out_decoded" / "logs_decoded" / "app_decoded.log"
    assert encoded.read_bytes().startswith(b"het\n")
    assert decoded.read_bytes() == (input_tree / "logs" / "app.log").read_bytes()

    nested = out_root / "out_decoded" / "logs_decoded" / "2024" / "blob_decoded.bin"
    assert nested.read_bytes() == bytes(range(256)) * 3

    assert "Processing:" in capsys.readouterr().out


def test_run_batch_records_unreadable_file(input_tree, tmp_path, monkeypatch):
    import huffcodec.utils.batch as batch

    def broken_encode(data):
        raise FileIOError("somewhere", "writing")

    monkeypatch.setattr(batch, "huffman_encode", broken_encode)
    results = run_batch_on_folder(input_tree, tmp_path / "out")

    errors = [r for r in results if r["status"] == "error"]
    assert len(errors) == 2
    assert "somewhere" in errors[0]["message"]


def test_generate_report(input_tree, tmp_path):
    out_root = tmp_path / "out"
    run_batch_on_folder(input_tree, out_root)

    report = generate_report(input_tree, out_root, out_root / "report")

    summary = report["summary"]
    assert summary["total_files"] == 3
    assert summary["success_count"] == 2
    assert summary["total_reference_bytes"] > 0

    rows = {Path(row["input_path"]).name: row for row in report["files"]}
    assert rows["empty.txt"]["status"] == "empty"
    assert rows["app.log"]["success"] is True
    assert rows["app.log"]["compression_ratio"] < 1.0
    # uniform bytes cannot compress below 8 bits per symbol
    assert rows["blob.bin"]["payload_bits"] == 256 * 3 * 8

    csv_text = (out_root / "report" / "report.csv").read_text(encoding="utf-8")
    assert csv_text.splitlines()[0] == ",".join(REPORT_COLUMNS)
    payload = json.loads((out_root / "report" / "report.json").read_text(encoding="utf-8"))
    assert payload["summary"]["total_files"] == 3


def test_generate_report_flags_missing_outputs(input_tree, tmp_path):
    report = generate_report(input_tree, tmp_path / "nothing", tmp_path / "report", formats=["json"])

    assert all(row["success"] is False for row in report["files"])
    assert not (tmp_path / "report" / "report.csv").exists()
    assert (tmp_path / "report" / "report.json").exists()
