"""Tests for splitting a single bucket."""

from __future__ import annotations

import numpy as np

from median_cut.core_types import Bucket, Channel
from median_cut.partition import sort_bucket, split_bucket, split_index


def test_split_on_widest_channel_at_first_value_above_mean() -> None:
    arr = np.array([[30, 0, 0], [0, 0, 0], [20, 0, 0], [10, 0, 0]], dtype=np.uint8)

    halves = split_bucket(arr, Bucket(0, 4))

    # red spread 30, mean 15, first red value above 15 is 20 at index 2
    assert halves == (Bucket(0, 2), Bucket(2, 4))
    assert arr[:, 0].tolist() == [0, 10, 20, 30]


def test_uniform_bucket_cannot_split() -> None:
    arr = np.full((4, 3), 5, dtype=np.uint8)

    assert split_bucket(arr, Bucket(0, 4)) is None
    assert arr.tolist() == [[5, 5, 5]] * 4


def test_single_pixel_bucket_cannot_split() -> None:
    arr = np.array([[1, 2, 3]], dtype=np.uint8)

    assert split_bucket(arr, Bucket(0, 1)) is None


def test_split_only_reorders_its_own_range() -> None:
    arr = np.array(
        [[9, 9, 9], [8, 8, 8], [50, 0, 0], [0, 0, 0], [40, 0, 0], [7, 7, 7]],
        dtype=np.uint8,
    )

    halves = split_bucket(arr, Bucket(2, 5))

    # red mean 30: sorted reds 0, 40, 50
    assert halves == (Bucket(2, 3), Bucket(3, 5))
    assert arr[2:5, 0].tolist() == [0, 40, 50]
    assert arr[[0, 1, 5]].tolist() == [[9, 9, 9], [8, 8, 8], [7, 7, 7]]


def test_split_follows_green_when_widest() -> None:
    arr = np.array([[0, 200, 0], [5, 0, 5], [0, 100, 0]], dtype=np.uint8)

    halves = split_bucket(arr, Bucket(0, 3))

    # green mean 100, only 200 is above it
    assert halves == (Bucket(0, 2), Bucket(2, 3))
    assert arr[:, 1].tolist() == [0, 100, 200]


def test_sort_bucket_orders_by_channel() -> None:
    arr = np.array([[0, 0, 9], [0, 0, 1], [0, 0, 5]], dtype=np.uint8)

    sort_bucket(arr, Bucket(0, 3), Channel.BLUE)

    assert arr[:, 2].tolist() == [1, 5, 9]


def test_split_index_returns_zero_when_nothing_exceeds_pivot() -> None:
    arr = np.array([[1, 0, 0], [2, 0, 0], [3, 0, 0]], dtype=np.uint8)

    assert split_index(arr, Bucket(0, 3), Channel.RED, 3) == 0
    assert split_index(arr, Bucket(0, 3), Channel.RED, 1) == 1
    assert split_index(arr, Bucket(0, 3), Channel.RED, 0) == 0
