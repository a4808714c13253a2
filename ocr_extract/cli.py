"""Command line interface: image bytes in, JSON text report out."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO, TextIO

from ocr_extract.api import create_pipeline


NO_INPUT_MESSAGE = "Error: No image data was received via standard input."


def _one_line(exc: BaseException) -> str:
    message = " ".join(str(exc).split())
    return message or type(exc).__name__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract text, lines and word boxes from an image. Reads standard input when no SOURCE is given."
    )
    parser.add_argument("source", nargs="?", type=Path, help="Optional path to the input image.")
    parser.add_argument("--config", type=Path, help="Path to a pipeline YAML config.")
    parser.add_argument("--compact", action="store_true", help="Emit compact JSON instead of indented JSON.")
    parser.add_argument("--verbose", action="store_true", help="Log pipeline progress to standard error.")
    return parser


def run(args: argparse.Namespace, stdin: BinaryIO, stdout: TextIO, stderr: TextIO) -> int:
    pretty = False if args.compact else None
    try:
        if args.source is None:
            image_bytes = stdin.read()
            if not image_bytes:
                print(NO_INPUT_MESSAGE, file=stderr)
                return 1
        pipeline = create_pipeline(args.config)
        if args.source is None:
            report = pipeline.recognize_as_json_from_bytes(image_bytes, pretty=pretty)
        else:
            report = pipeline.recognize_as_json_from_path(args.source, pretty=pretty)
    except Exception as exc:
        print(f"Error: {_one_line(exc)}", file=stderr)
        return 1

    print(report, file=stdout)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s:%(name)s:%(message)s",
            stream=sys.stderr,
        )
    return run(args, sys.stdin.buffer, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
