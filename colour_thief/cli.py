#!/usr/bin/env python3
"""
colour_thief CLI
Print the median-cut palette of an image, or of every image in a folder.

Usage:
  colour-thief SRC --count N --quality Q [--keep-white] [--luma yiq|bt601|bt709]
               [--sort] [--jobs J] [--debug]

Output:
  One line per palette colour: hex, rgb, pixel count, share and dark/light.

Notes:
  Decoding goes through Pillow (colour_thief.image_io). Folders are processed
  with a ThreadPoolExecutor; per-file output is captured and printed in order.
"""

from __future__ import annotations

import argparse
import io
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from contextlib import redirect_stdout
from pathlib import Path
from typing import List, Optional, Sequence

from PIL import UnidentifiedImageError

from .api import get_palette
from .constants import DEFAULT_COLOUR_COUNT, DEFAULT_QUALITY
from .image_io import is_image_file, load_image_rgba
from .luma import LumaStrategy, parse_luma_strategy
from .utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
    palette_report_lines,
    print_banner,
    print_config_line,
)

IMAGE_EXTS = {".png", ".jpg", ".jpeg", ".webp", ".bmp", ".gif"}


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        src: Path to image or folder
        count: palette size
        quality: pixel sampling stride (1 = every pixel)
        keep_white: count near-white pixels
        luma: "yiq" | "bt601" | "bt709"
        sort: order output by population
        jobs: files processed in parallel
        debug: bool for split-by-split details
    """
    parser = argparse.ArgumentParser(
        prog="colour-thief",
        description="Extract a median-cut colour palette from image(s).",
    )
    parser.add_argument("src", type=Path, help="Input image or folder")
    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_COLOUR_COUNT,
        help="Number of palette colours.",
    )
    parser.add_argument(
        "--quality",
        type=int,
        default=DEFAULT_QUALITY,
        help="Sample every Q-th pixel. 1 is slowest and most accurate.",
    )
    parser.add_argument(
        "--keep-white",
        action="store_true",
        help="Do not skip near-white pixels.",
    )
    parser.add_argument(
        "--luma",
        choices=[s.value for s in LumaStrategy],
        default=LumaStrategy.YIQ.value,
        help="Luma model used for the dark/light flag.",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="List colours by population, largest first.",
    )
    parser.add_argument(
        "--jobs", type=int, default=1, help="Files processed in parallel"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose split details")
    return parser.parse_args(argv)


def _process_single_image(path: Path, args: argparse.Namespace) -> None:
    """Load -> quantise -> report for one file."""
    t_start = time.perf_counter()
    print_banner(path.name)

    try:
        pixels = load_image_rgba(path)
    except (UnidentifiedImageError, OSError) as exc:
        error(f"{path.name}: cannot read image ({exc})")
        return
    t_loaded = time.perf_counter()

    height, width = pixels.shape[0], pixels.shape[1]
    if args.debug:
        debug_log(key_value_pairs_to_string([("Loaded", f"{width}x{height}")]))

    palette = get_palette(
        pixels,
        args.count,
        args.quality,
        not args.keep_white,
        luma=parse_luma_strategy(args.luma),
        debug=args.debug,
    )
    t_done = time.perf_counter()

    if args.sort:
        palette = sorted(palette, key=lambda entry: -entry.population)

    if not palette:
        log("No colours (every sampled pixel was ignored).")
    else:
        log(f"Palette ({len(palette)} of {args.count}):")
        for line in palette_report_lines(palette):
            log(f"  {line}")

    if args.debug:
        debug_log(
            f"Total {format_total_duration_compact(t_done - t_start)}  "
            f"(load={format_seconds_compact(t_loaded - t_start)}, "
            f"quantize={format_seconds_compact(t_done - t_loaded)})"
        )
    else:
        log(f"Total time {format_total_duration_compact(t_done - t_start)}")


def _process_one_captured(path: Path, args: argparse.Namespace) -> str:
    """
    Process a single file with stdout capture.

    Useful for concurrent execution where output should be printed in order.
    """
    buf = io.StringIO()
    with redirect_stdout(buf):
        _process_single_image(path, args)
    return buf.getvalue()


def _list_images(folder: Path) -> List[Path]:
    files = [
        p
        for p in folder.iterdir()
        if p.is_file() and p.suffix.lower() in IMAGE_EXTS and is_image_file(p)
    ]
    files.sort(key=lambda p: p.name.lower())
    return files


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Handles a single file or a folder. In folder mode supports --jobs
    parallelism while preserving readable output ordering.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    print_config_line(
        "run",
        [
            ("Count", args.count),
            ("Quality", args.quality),
            ("Ignore white", not args.keep_white),
            ("Luma", args.luma),
        ],
        debug=False,
    )

    src: Path = args.src
    if not src.exists():
        error(f"not found: {src}")
        return 2

    if not src.is_dir():
        _process_single_image(src, args)
        return 0

    files = _list_images(src)
    if args.debug:
        debug_log(
            key_value_pairs_to_string([("Images", len(files)), ("Jobs", args.jobs)])
        )

    if args.jobs <= 1:
        for p in files:
            _process_single_image(p, args)
    else:
        with ThreadPoolExecutor(max_workers=args.jobs) as ex:
            futures = [ex.submit(_process_one_captured, p, args) for p in files]
            blocks = [f.result() for f in futures]
        print("".join(blocks), end="", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
