from __future__ import annotations

"""
Colour model operations.

Exports:
  channel_value(colour, channel) -> int
  component_wise_min(a, b) -> Colour
  component_wise_max(a, b) -> Colour
  dominant_channel(colour) -> Channel
  palette_bounds(colours) -> (lo, hi)
"""

from typing import Iterable, Tuple

from .core_types import Channel, Colour


def channel_value(colour: Colour, channel: Channel) -> int:
    return colour[channel]


def component_wise_min(a: Colour, b: Colour) -> Colour:
    return Colour(min(a[0], b[0]), min(a[1], b[1]), min(a[2], b[2]))


def component_wise_max(a: Colour, b: Colour) -> Colour:
    return Colour(max(a[0], b[0]), max(a[1], b[1]), max(a[2], b[2]))


def dominant_channel(colour: Colour) -> Channel:
    """
    Channel holding the largest component.

    Red wins only when strictly above both others; otherwise green wins when
    strictly above blue; blue takes every remaining tie.
    """
    red, green, blue = colour
    if red > green and red > blue:
        return Channel.RED
    if green > blue:
        return Channel.GREEN
    return Channel.BLUE


def palette_bounds(colours: Iterable[Colour]) -> Tuple[Colour, Colour]:
    """Component-wise (min, max) over a non-empty collection of colours."""
    it = iter(colours)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError("palette_bounds() needs at least one colour") from None
    lo = hi = Colour(*first)
    for c in it:
        lo = component_wise_min(lo, c)
        hi = component_wise_max(hi, c)
    return lo, hi


__all__ = [
    "channel_value",
    "component_wise_min",
    "component_wise_max",
    "dominant_channel",
    "palette_bounds",
]
