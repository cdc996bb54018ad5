#!/usr/bin/env python3
"""
extract_colours.py
Print the palette (or dominant colour) of images from their opaque pixels.

Usage:
  python extract_colours.py INPUT --colors K --quality Q [--ignore-white] [--dominant] [--swatch DIR] --debug

Input:
  Any Pillow-readable image, or a folder of them. Pixels with alpha < 125 never
  contribute; with --ignore-white near-white pixels are skipped too.

Output:
  One line per palette colour: hex, RGBA, population and share. With --swatch,
  writes <stem>_palette.png strips into DIR.

Notes:
  Quality is a sampling stride: 1 inspects every pixel, 10 every tenth.
  Folders are processed with --jobs threads; output keeps file order.
"""

from __future__ import annotations

import argparse
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from PIL import Image, UnidentifiedImageError

from dominant_colour.constants import (
    DEFAULT_COLOR_COUNT,
    DEFAULT_QUALITY,
    IMAGE_EXTENSIONS,
    MAX_COLOR_COUNT,
    MIN_COLOR_COUNT,
)
from dominant_colour.core_types import QuantizedColor
from dominant_colour.image_io import save_palette_swatch
from dominant_colour.palette import average_palette, get_palette
from dominant_colour.utils import (
    capture_log,
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_percentage,
    format_total_duration_compact,
    log,
    print_banner,
    print_config_line,
    warn,
)


def parse_cli_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        src: Path to image or folder
        colors: palette size
        quality: sampling stride
        ignore_white: skip near-white pixels
        dominant: print only the averaged dominant colour
        swatch: optional output directory for palette strips
        premultiplied: decode with premultiplied alpha
        jobs: parallel file workers
        debug: verbose sampling details
    """
    parser = argparse.ArgumentParser(
        prog="extract_colours",
        description="Extract a colour palette from the opaque pixels of image(s).",
    )
    parser.add_argument("src", type=Path, help="Input image or folder")
    parser.add_argument(
        "-k",
        "--colors",
        type=int,
        default=DEFAULT_COLOR_COUNT,
        help="Palette size (1-256).",
    )
    parser.add_argument(
        "-q",
        "--quality",
        type=int,
        default=DEFAULT_QUALITY,
        help="Sampling stride. 1 = every pixel; values < 1 use the default.",
    )
    parser.add_argument(
        "--ignore-white", action="store_true", help="Skip near-white pixels"
    )
    parser.add_argument(
        "--dominant",
        action="store_true",
        help="Print only the dominant colour (average of a 3-colour palette).",
    )
    parser.add_argument(
        "--swatch", type=Path, default=None, help="Write palette strips to DIR"
    )
    parser.add_argument(
        "--premultiplied",
        action="store_true",
        help="Decode with premultiplied alpha",
    )
    parser.add_argument(
        "--jobs", type=int, default=2, help="Files processed in parallel"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose sampling details")
    return parser.parse_args(argv)


def _format_colour_line(qc: QuantizedColor, total: int) -> str:
    r, g, b, a = qc.color
    share = qc.population / total if total else 0.0
    tone = "dark" if qc.is_dark else "light"
    return (
        f"  {qc.hex}  rgba({r}, {g}, {b}, {a})  "
        f"population={qc.population:,}  share={format_percentage(share)}  {tone}"
    )


# Per-file processing


def _process_single_image(src_path: Path, args: argparse.Namespace) -> bool:
    """
    Process one image end-to-end: decode -> sample -> quantise -> report.

    Returns False when the image could not be processed.
    """
    t_start = time.perf_counter()
    print_banner(src_path.name)

    color_count = DEFAULT_COLOR_COUNT if args.dominant else args.colors
    try:
        palette = get_palette(
            src_path,
            color_count,
            args.quality,
            args.ignore_white,
            premultiplied=args.premultiplied,
            debug=args.debug,
        )
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as e:
        error(f"{src_path.name}: {e}")
        return False

    if not palette:
        warn("no candidate pixels (fully transparent or filtered out)")
        return True

    if args.dominant:
        dominant = average_palette(palette)
        if dominant is not None:
            log("Dominant colour:")
            log(_format_colour_line(dominant, dominant.population))
    else:
        total = sum(qc.population for qc in palette)
        log(f"Palette ({len(palette)} colours, {total:,} sampled pixels):")
        for qc in palette:
            log(_format_colour_line(qc, total))

    if args.swatch is not None:
        args.swatch.mkdir(parents=True, exist_ok=True)
        out = save_palette_swatch(args.swatch / f"{src_path.stem}_palette.png", palette)
        log(f"Wrote {out.name}")

    elapsed = format_total_duration_compact(time.perf_counter() - t_start)
    if args.debug:
        debug_log(f"Total {elapsed}")
    else:
        log(f"Total time {elapsed}")
    return True


def _process_one_captured(path: Path, args: argparse.Namespace):
    """
    Process a single file with its log output captured.

    Useful for concurrent execution where output should be printed in order.
    """
    with capture_log() as buf:
        ok = _process_single_image(path, args)
    return ok, buf.getvalue()


def _collect_images(folder: Path) -> List[Path]:
    files = [
        p
        for p in folder.iterdir()
        if p.is_file()
        and p.suffix.lower() in IMAGE_EXTENSIONS
        and not p.stem.endswith("_palette")
    ]
    files.sort(key=lambda p: p.name.lower())
    return files


# Entry point


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Handles single file or folder. In folder mode supports --jobs parallelism
    while preserving readable output ordering. Returns the process exit code.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    print_config_line(
        "run",
        [
            ("Colours", DEFAULT_COLOR_COUNT if args.dominant else args.colors),
            ("Quality", args.quality),
            ("Ignore white", args.ignore_white),
            ("Jobs", args.jobs),
        ],
        debug=False,
    )

    src = args.src
    if not src.exists():
        error(f"not found: {src}")
        return 2
    if not MIN_COLOR_COUNT <= args.colors <= MAX_COLOR_COUNT:
        error(
            f"--colors must be in [{MIN_COLOR_COUNT}, {MAX_COLOR_COUNT}], got {args.colors}"
        )
        return 2

    if not src.is_dir():
        return 0 if _process_single_image(src, args) else 1

    files = _collect_images(src)
    if args.debug:
        debug_log(f"Images: {len(files)}")

    if args.jobs <= 1:
        results = [_process_single_image(p, args) for p in files]
    else:
        with ThreadPoolExecutor(max_workers=args.jobs) as ex:
            futures = [ex.submit(_process_one_captured, p, args) for p in files]
            blocks = [f.result() for f in futures]
        results = [ok for ok, _ in blocks]
        print("".join(text for _, text in blocks), end="", flush=True)
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
