"""Разбор аргументов командной строки."""
from __future__ import annotations

import argparse


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def _positive_int(value: str) -> int:
    number = _non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jpeg-resize",
        description="Resize a JPEG file or every JPEG under a directory.",
    )
    parser.add_argument("path", help="Image file or directory to process.")
    parser.add_argument(
        "-w",
        "--width",
        type=_non_negative_int,
        default=0,
        help="Width of resized image; 0 keeps the aspect ratio of --height.",
    )
    parser.add_argument(
        "-H",
        "--height",
        type=_non_negative_int,
        default=0,
        help="Height of resized image; 0 keeps the aspect ratio of --width.",
    )
    parser.add_argument(
        "-p",
        "--prefix",
        "--pre",
        dest="prefix",
        default="",
        help="Output file prefix (default: the nonzero dimension).",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Resize files with any extension.",
    )
    parser.add_argument(
        "-s",
        "--quiet",
        "--silent",
        dest="quiet",
        action="store_true",
        help="Print only fatal errors.",
    )
    parser.add_argument(
        "-o",
        "--output-root",
        default=None,
        help="Write outputs under this directory, mirroring the source tree.",
    )
    parser.add_argument(
        "-j",
        "--workers",
        type=_positive_int,
        default=1,
        help="Number of files resized in parallel (default: 1).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser
