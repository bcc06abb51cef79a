# median_cut/stats.py
from __future__ import annotations

"""
Per-bucket channel statistics.

All reductions accumulate in uint64 and floor-divide by the bucket size, so
means are truncated to the 8-bit value below.
"""

import numpy as np

from .core_types import Bucket, Channel, Colour, U8Pixels, colour_from_row


def _non_empty_view(pixels: U8Pixels, bucket: Bucket) -> U8Pixels:
    view = bucket.view(pixels)
    if view.shape[0] == 0:
        raise ValueError(f"empty bucket [{bucket.start}, {bucket.end})")
    return view


def channel_range(pixels: U8Pixels, bucket: Bucket) -> Colour:
    """
    Per-channel spread: component-wise max colour minus min colour.

    max/min over axis 0 is the array form of folding component_wise_max and
    component_wise_min over every row of the bucket.
    """
    view = _non_empty_view(pixels, bucket)
    hi = view.max(axis=0)
    lo = view.min(axis=0)
    return colour_from_row(hi - lo)


def channel_mean(pixels: U8Pixels, bucket: Bucket, channel: Channel) -> int:
    view = _non_empty_view(pixels, bucket)
    total = view[:, int(channel)].sum(dtype=np.uint64)
    return int(total // np.uint64(view.shape[0]))


def colour_mean(pixels: U8Pixels, bucket: Bucket) -> Colour:
    view = _non_empty_view(pixels, bucket)
    totals = view.sum(axis=0, dtype=np.uint64)
    return colour_from_row(totals // np.uint64(view.shape[0]))


__all__ = ["channel_range", "channel_mean", "colour_mean"]
