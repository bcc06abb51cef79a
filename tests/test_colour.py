"""Tests for the colour model operations."""

from __future__ import annotations

import pytest

from median_cut.colour import (
    channel_value,
    component_wise_max,
    component_wise_min,
    dominant_channel,
    palette_bounds,
)
from median_cut.core_types import Channel, Colour


@pytest.mark.parametrize(
    "rgb, expected",
    [
        ((5, 1, 1), Channel.RED),
        ((1, 5, 2), Channel.GREEN),
        ((1, 2, 5), Channel.BLUE),
        # ties
        ((5, 5, 1), Channel.GREEN),
        ((5, 1, 5), Channel.BLUE),
        ((1, 5, 5), Channel.BLUE),
        ((0, 0, 0), Channel.BLUE),
        ((7, 7, 7), Channel.BLUE),
    ],
)
def test_dominant_channel_tie_break(rgb, expected) -> None:
    assert dominant_channel(Colour(*rgb)) is expected


def test_channel_value_selects_component() -> None:
    c = Colour(10, 20, 30)
    assert channel_value(c, Channel.RED) == 10
    assert channel_value(c, Channel.GREEN) == 20
    assert channel_value(c, Channel.BLUE) == 30


def test_component_wise_min_max_do_not_mutate() -> None:
    a = Colour(10, 200, 30)
    b = Colour(50, 5, 30)

    assert component_wise_min(a, b) == Colour(10, 5, 30)
    assert component_wise_max(a, b) == Colour(50, 200, 30)
    assert a == Colour(10, 200, 30)
    assert b == Colour(50, 5, 30)


def test_palette_bounds_folds_all_colours() -> None:
    lo, hi = palette_bounds([Colour(10, 20, 30), Colour(0, 90, 5), Colour(7, 7, 255)])

    assert lo == Colour(0, 7, 5)
    assert hi == Colour(10, 90, 255)


def test_palette_bounds_single_colour() -> None:
    assert palette_bounds([Colour(1, 2, 3)]) == (Colour(1, 2, 3), Colour(1, 2, 3))


def test_palette_bounds_rejects_empty() -> None:
    with pytest.raises(ValueError):
        palette_bounds([])
