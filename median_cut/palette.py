from __future__ import annotations

"""
Median-cut palette builder.

Exports:
  split_round(pixels, buckets) -> List[Bucket]
  build_buckets(pixels, num_colours, *, debug=False) -> (pixels_u8, buckets)
  generate_palette(pixels, num_colours, *, debug=False) -> Palette (List[Colour])
  generate_palette_entries(pixels, num_colours, *, debug=False) -> List[PaletteEntry]

Notes:
  - Work proceeds in rounds. A round visits every bucket present when it
    starts and replaces each with its two halves, so the count can jump past
    the target (asking for 10 gives 16 on evenly splitting input).
  - A bucket that cannot be halved is kept whole, marked unsplittable and
    still counted. Rounds stop once the target is met or nothing can split,
    so the palette never has more colours than there are pixels.
  - Targets 0 and 1 both return the mean of the whole input.
"""

from collections import deque
from typing import Deque, List, Sequence, Tuple, Union

import numpy as np

from .core_types import Bucket, Palette, PaletteEntry, U8Pixels, as_pixel_array
from .partition import split_bucket
from .stats import colour_mean
from .utils import debug_log, key_value_pairs_to_string

PixelsLike = Union[np.ndarray, Sequence[Sequence[int]]]


def split_round(pixels: U8Pixels, buckets: Sequence[Bucket]) -> List[Bucket]:
    """
    One round: every bucket is replaced by its halves, or by itself marked
    unsplittable. Order follows the queue (front popped, results appended).
    """
    work: Deque[Bucket] = deque(buckets)
    for _ in range(len(buckets)):
        bucket = work.popleft()
        if not bucket.splittable:
            work.append(bucket)
            continue
        halves = split_bucket(pixels, bucket)
        if halves is None:
            work.append(bucket.frozen())
            continue
        work.extend(halves)
    return list(work)


def build_buckets(
    pixels: PixelsLike, num_colours: int, *, debug: bool = False
) -> Tuple[U8Pixels, List[Bucket]]:
    """
    Partition pixels into roughly num_colours buckets.

    Args:
      pixels      : uint8 [N,3] array (sorted in place) or a sequence of RGB rows
      num_colours : requested palette size, >= 0
      debug       : log per-round bucket counts

    Returns:
      (arr, buckets) where arr is the array the buckets index into and
      buckets are in insertion order.
    """
    if int(num_colours) < 0:
        raise ValueError(f"num_colours must be >= 0, got {num_colours}")
    arr = as_pixel_array(pixels)
    if arr.shape[0] == 0:
        raise ValueError("cannot build a palette from an empty pixel list")

    target = int(num_colours)
    buckets: List[Bucket] = [Bucket(0, arr.shape[0])]
    rounds = 0
    while len(buckets) < target and any(b.splittable for b in buckets):
        buckets = split_round(arr, buckets)
        rounds += 1
        if debug:
            debug_log(
                key_value_pairs_to_string(
                    [
                        ("Round", rounds),
                        ("Buckets", len(buckets)),
                        ("Unsplittable", sum(1 for b in buckets if not b.splittable)),
                    ]
                )
            )
    return arr, buckets


def generate_palette_entries(
    pixels: PixelsLike, num_colours: int, *, debug: bool = False
) -> List[PaletteEntry]:
    """Palette colours paired with the size of the bucket behind each."""
    arr, buckets = build_buckets(pixels, num_colours, debug=debug)
    return [PaletteEntry(colour_mean(arr, b), len(b)) for b in buckets]


def generate_palette(
    pixels: PixelsLike, num_colours: int, *, debug: bool = False
) -> Palette:
    """Reduce pixels to a median-cut palette of about num_colours colours."""
    arr, buckets = build_buckets(pixels, num_colours, debug=debug)
    return [colour_mean(arr, b) for b in buckets]


__all__ = [
    "split_round",
    "build_buckets",
    "generate_palette",
    "generate_palette_entries",
]
