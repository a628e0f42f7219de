"""
Command line entry point.

Without a subcommand the two-choice menu is shown::

    1 - encode, 2 - decode
    Filename: notes.txt

Encoding writes `encoded.txt`, decoding writes `decoded.txt`, both into
`--output-dir` (default: current directory).
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, List, Optional

from huffcodec.encoding_schemes import HuffmanError
from huffcodec.pipeline import CodecConfig, decode_file, encode_file, run_batch_on_folder

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def run_menu(cfg: CodecConfig, prompt: Optional[Callable[[str], str]] = None) -> Path:
    if prompt is None:
        prompt = input

    print("1 - encode, 2 - decode")
    try:
        choice = prompt("").strip()
        if choice not in {"1", "2"}:
            raise ValueError("Invalid usage.")
        filename = prompt("Filename: ").strip()
    except EOFError:
        raise ValueError("Invalid usage.") from None

    if choice == "1":
        return encode_file(filename, cfg=cfg)
    return decode_file(filename, cfg=cfg)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huffcodec",
        description="Huffman encode or decode files.",
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for encoded.txt / decoded.txt (default: current directory).",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("menu", help="Interactive 1 - encode, 2 - decode menu (default).")

    enc = sub.add_parser("encode", help="Encode a file.")
    enc.add_argument("path", help="File to encode.")
    enc.add_argument("-o", "--output", default="", help="Artifact path (default: <output-dir>/encoded.txt).")

    dec = sub.add_parser("decode", help="Decode an encoded artifact.")
    dec.add_argument("path", help="Artifact to decode.")
    dec.add_argument("-o", "--output", default="", help="Output path (default: <output-dir>/decoded.txt).")

    batch = sub.add_parser("batch", help="Encode and decode every file in a folder.")
    batch.add_argument("--input-root", required=True, help="Folder with the files to process.")
    batch.add_argument("--output-root", required=True, help="Folder receiving out_encoded/ and out_decoded/.")
    batch.add_argument("--verify", action="store_true", help="Fail a file whose round trip differs.")

    report = sub.add_parser("report", help="Write a compression report for a batch run.")
    report.add_argument("--input-root", required=True, help="Path to original input data root.")
    report.add_argument("--output-root", required=True, help="Path to batch output root.")
    report.add_argument("--report-dir", default="", help="Report directory (default: <output-root>/report).")
    report.add_argument("--formats", default="csv,json", help="Comma-separated list: csv,json.")

    return parser


def _dispatch(args: argparse.Namespace, cfg: CodecConfig) -> None:
    command = args.command or "menu"

    if command == "menu":
        target = run_menu(cfg)
        print(f"Written to {target}")
    elif command == "encode":
        target = encode_file(args.path, args.output or None, cfg=cfg)
        print(f"Encoded output: {target}")
    elif command == "decode":
        target = decode_file(args.path, args.output or None, cfg=cfg)
        print(f"Decoded output: {target}")
    elif command == "batch":
        cfg.verify_roundtrip = args.verify
        results = run_batch_on_folder(Path(args.input_root), Path(args.output_root), cfg)
        failed = [r for r in results if r["status"] == "error"]
        print(f"Processed {len(results)} files, {len(failed)} failed.")
        if failed:
            raise HuffmanError(f"{len(failed)} file(s) failed")
    elif command == "report":
        from huffcodec.reporting.report import generate_report

        output_root = Path(args.output_root)
        report_dir = Path(args.report_dir) if args.report_dir else output_root / "report"
        formats = [fmt.strip() for fmt in args.formats.split(",") if fmt.strip()]
        generate_report(
            input_root=Path(args.input_root),
            output_root=output_root,
            report_dir=report_dir,
            formats=formats,
            cfg=cfg,
        )
        print(f"Report written to {report_dir}")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        cfg = CodecConfig(output_dir=args.output_dir)
        _dispatch(args, cfg)
    except HuffmanError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
