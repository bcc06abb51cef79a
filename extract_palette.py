#!/usr/bin/env python3
"""
extract_palette.py
Print a median-cut palette for one image or every image in a folder.

Usage:
  python extract_palette.py SRC --colours K --height H --resample [nearest|bilinear|bicubic|lanczos] --swatch --debug

Input:
  Any Pillow-readable image, or a folder of them. In a folder, files with an
  image suffix that Pillow cannot open are skipped with a warning. Only pixels
  with alpha at or above the threshold take part.

Output:
  One line per palette colour, in bucket order:
    #rrggbb  rgb(r, g, b)  pixels=N  share=S%
  Rounds halve every bucket at once, so the palette can hold more colours
  than asked for (K=10 usually gives 16) or fewer when the image has few
  distinct colours.

Exit codes:
  0 ok, 1 when some file failed, 2 for bad arguments or a missing SRC.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from median_cut.colour import palette_bounds
from median_cut.constants import (
    ALPHA_THRESHOLD,
    DEFAULT_NUM_COLOURS,
    DEFAULT_RESAMPLE,
    IMAGE_EXTENSIONS,
    MAX_NUM_COLOURS,
    RESAMPLE_NAMES,
)
from median_cut.core_types import rgb_to_hex
from median_cut.image_io import is_image_file, load_pixels
from median_cut.palette import generate_palette_entries
from median_cut.utils import (
    # formatting
    format_seconds_compact,
    format_total_duration_compact,
    key_value_pairs_to_string,
    palette_report,
    # pretty logging
    print_banner,
    print_config_line,
    log,
    debug_log,
    warn,
    error,
    enable_line_buffered_stdout,
)

# CLI args


def _colour_count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0 or value > MAX_NUM_COLOURS:
        raise argparse.ArgumentTypeError(f"must be in 0..{MAX_NUM_COLOURS}")
    return value


def _alpha_threshold(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0 or value > 255:
        raise argparse.ArgumentTypeError("must be in 0..255")
    return value


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments for palette extraction.

    Returns:
      argparse.Namespace with:
        src: Path to image or folder
        colours: requested palette size
        height: optional int max height before extraction
        resample: resize filter name
        alpha_threshold: minimum alpha for a pixel to count
        swatch: bool, prefix lines with a truecolour block
        debug: bool for per-round details
    """
    parser = argparse.ArgumentParser(
        prog="extract-palette",
        description="Print a median-cut colour palette for image(s).",
    )
    parser.add_argument("src", type=Path, help="Input image or folder")
    parser.add_argument(
        "-k",
        "--colours",
        type=_colour_count,
        default=DEFAULT_NUM_COLOURS,
        help=f"Requested palette size (0..{MAX_NUM_COLOURS}).",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Downsize so height<=H before extraction. Omit for full size.",
    )
    parser.add_argument(
        "--resample",
        choices=list(RESAMPLE_NAMES),
        default=DEFAULT_RESAMPLE,
        help="Scaling filter used with --height.",
    )
    parser.add_argument(
        "--alpha-threshold",
        type=_alpha_threshold,
        default=ALPHA_THRESHOLD,
        help="Pixels with alpha below this (0..255) are ignored.",
    )
    parser.add_argument(
        "--swatch", action="store_true", help="Show a colour block per line"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose round details")
    return parser.parse_args(argv)


# Per-file processing


def _process_single_image(
    src_path: Path,
    colours: int,
    height_cap: Optional[int],
    resample_name: str,
    alpha_threshold: int,
    swatch: bool,
    debug: bool,
) -> None:
    """
    Process a single image path end-to-end:
      load -> optional resize -> median cut -> report.
    """
    t_start = time.perf_counter()
    print_banner(src_path.name)

    pixels = load_pixels(
        src_path,
        height=height_cap,
        resample=resample_name,
        alpha_threshold=alpha_threshold,
    )
    t_loaded = time.perf_counter()
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Visible pixels", int(pixels.shape[0])),
                    ("Load time", format_seconds_compact(t_loaded - t_start)),
                ]
            )
        )

    entries = generate_palette_entries(pixels, colours, debug=debug)
    t_done = time.perf_counter()

    if len(entries) < max(colours, 1):
        warn(f"only {len(entries)} distinct buckets (asked for {colours})")

    log(f"Palette ({len(entries)} colours):")
    for line in palette_report(entries, swatch=swatch):
        log(f"  {line}")

    if debug:
        lo, hi = palette_bounds(e.colour for e in entries)
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Extent lo", rgb_to_hex(lo)),
                    ("Extent hi", rgb_to_hex(hi)),
                    ("Cut time", format_seconds_compact(t_done - t_loaded)),
                ]
            )
        )
    log(f"Total time {format_total_duration_compact(t_done - t_start)}")


def _collect_images(src: Path, debug: bool) -> List[Path]:
    """Image files in src by name; unreadable files with an image suffix are skipped."""
    all_entries = list(src.iterdir())
    candidates = [
        p for p in all_entries if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS
    ]
    candidates.sort(key=lambda p: p.name.lower())
    files: List[Path] = []
    for p in candidates:
        if is_image_file(p):
            files.append(p)
        else:
            warn(f"skipped {p.name}: not a readable image")
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Folder entries", len(all_entries)),
                    ("Images", len(files)),
                    ("Skipped", len(candidates) - len(files)),
                ]
            )
        )
    return files


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Handles a single file or a folder. Files are processed in name order; a
    failing file is reported and the rest still run.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    print_config_line(
        "run",
        [
            ("Colours", args.colours),
            ("Height cap", args.height or "-"),
            ("Resample", args.resample),
        ],
        debug=False,
    )

    src = args.src
    if not src.exists():
        error(f"not found: {src}")
        return 2

    files = _collect_images(src, args.debug) if src.is_dir() else [src]
    if not files:
        warn(f"no images in {src}")
        return 0

    failed = 0
    for path in files:
        try:
            _process_single_image(
                path,
                args.colours,
                args.height,
                args.resample,
                args.alpha_threshold,
                args.swatch,
                args.debug,
            )
        except (OSError, ValueError) as e:
            failed += 1
            error(f"{path.name}: {e}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
