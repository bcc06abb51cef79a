from __future__ import annotations

"""
Bucket partitioning.

Exports:
  sort_bucket(pixels, bucket, channel) -> None
  split_index(pixels, bucket, channel, pivot) -> int
  split_bucket(pixels, bucket) -> Optional[(left, right)]

Notes:
  - The split channel is the dominant channel of the bucket's channel_range,
    and the pivot is that channel's floor mean.
  - Rows are reordered in place inside the bucket's range only; the rest of
    the pixel array is never touched.
"""

from typing import Optional, Tuple

import numpy as np

from .colour import dominant_channel
from .core_types import Bucket, Channel, U8Pixels
from .stats import channel_mean, channel_range


def sort_bucket(pixels: U8Pixels, bucket: Bucket, channel: Channel) -> None:
    """Order the bucket's rows by ascending value of one channel, in place."""
    view = bucket.view(pixels)
    order = np.argsort(view[:, int(channel)], kind="quicksort")
    view[...] = view[order]


def split_index(
    pixels: U8Pixels, bucket: Bucket, channel: Channel, pivot: int
) -> int:
    """
    Offset (relative to bucket.start) of the first row whose channel value is
    strictly above pivot. Expects the bucket sorted on that channel.
    Returns 0 when no row is above pivot.
    """
    values = bucket.view(pixels)[:, int(channel)]
    idx = int(np.searchsorted(values, pivot, side="right"))
    return 0 if idx >= values.shape[0] else idx


def split_bucket(
    pixels: U8Pixels, bucket: Bucket
) -> Optional[Tuple[Bucket, Bucket]]:
    """
    Split a non-empty bucket into (left, right) around its widest channel.

    Returns None when the left half would be empty, which only happens for a
    bucket holding a single distinct colour. The bucket is still sorted.
    """
    channel = dominant_channel(channel_range(pixels, bucket))
    pivot = channel_mean(pixels, bucket, channel)
    sort_bucket(pixels, bucket, channel)
    offset = split_index(pixels, bucket, channel, pivot)
    if offset == 0:
        return None
    mid = bucket.start + offset
    return Bucket(bucket.start, mid), Bucket(mid, bucket.end)


__all__ = ["sort_bucket", "split_index", "split_bucket"]
