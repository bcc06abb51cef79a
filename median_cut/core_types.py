from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, NamedTuple, Sequence, Union

import numpy as np
from numpy.typing import NDArray

# Basic aliases

HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 3)
U8Mask = NDArray[np.uint8]  # (H, W)
U8Pixels = NDArray[np.uint8]  # (N, 3) flat pixel list

# Value objects


class Channel(IntEnum):
    """Colour channel selector. Values double as column indices."""

    RED = 0
    GREEN = 1
    BLUE = 2


class Colour(NamedTuple):
    """Immutable 8-bit RGB triple."""

    red: int
    green: int
    blue: int

    def __str__(self) -> str:
        return rgb_to_hex(self)


@dataclass(frozen=True)
class Bucket:
    """
    Contiguous [start, end) range of rows in a shared (N,3) pixel array.

    A bucket never owns pixels; view() returns a numpy slice that aliases the
    backing array, so sorting through it reorders the caller's pixels.
    """

    start: int
    end: int
    splittable: bool = True

    def __len__(self) -> int:
        return self.end - self.start

    def view(self, pixels: U8Pixels) -> U8Pixels:
        return pixels[self.start : self.end]

    def frozen(self) -> "Bucket":
        """Same range, excluded from further splitting."""
        return Bucket(self.start, self.end, splittable=False)


@dataclass(frozen=True)
class PaletteEntry:
    """Palette colour with the pixel count of the bucket it was reduced from."""

    colour: Colour
    count: int


Palette = List[Colour]

# Small helpers


def rgb_to_hex(rgb: Sequence[int]) -> HexStr:
    """RGB triple to lowercase hex string '#rrggbb'."""
    return f"#{int(rgb[0]):02x}{int(rgb[1]):02x}{int(rgb[2]):02x}"


def colour_from_row(value: Union[Sequence[int], NDArray[np.generic]]) -> Colour:
    """
    Coerce a 3-length sequence or array row to a Colour of plain ints.
    Helpful when extracting values from NumPy rows.
    """
    if isinstance(value, np.ndarray):
        if value.size < 3:
            raise ValueError("array too small for RGB")
        flat = value.reshape(-1)
        return Colour(int(flat[0]), int(flat[1]), int(flat[2]))
    if len(value) < 3:
        raise ValueError("sequence too small for RGB")
    return Colour(int(value[0]), int(value[1]), int(value[2]))


def assert_u8_pixels(pixels: np.ndarray) -> U8Pixels:
    """Validate a uint8 (N,3) pixel list and return it typed as U8Pixels."""
    if pixels.dtype != np.uint8 or pixels.ndim != 2 or pixels.shape[-1] != 3:
        raise TypeError("expected uint8 (N,3) pixel array")
    return pixels  # type: ignore[return-value]


def as_pixel_array(
    pixels: Union[np.ndarray, Sequence[Sequence[int]]],
) -> U8Pixels:
    """
    Return a C-contiguous uint8 (N,3) array for the given pixels.

    A conforming ndarray is returned as-is so that in-place sorting is visible
    to the caller. Python sequences are copied into a new array.
    """
    if isinstance(pixels, np.ndarray):
        arr = assert_u8_pixels(pixels)
        if not arr.flags.c_contiguous:
            arr = np.ascontiguousarray(arr)
        return arr
    rows = [tuple(int(c) for c in row) for row in pixels]
    if any(len(row) != 3 for row in rows):
        raise TypeError("each pixel must have exactly 3 channels")
    if any(c < 0 or c > 255 for row in rows for c in row):
        raise ValueError("channel values must be in 0..255")
    return np.array(rows, dtype=np.uint8).reshape(-1, 3)


__all__ = [
    # aliases / types
    "HexStr",
    "U8Image",
    "U8Mask",
    "U8Pixels",
    "Palette",
    # value objects
    "Channel",
    "Colour",
    "Bucket",
    "PaletteEntry",
    # helpers
    "rgb_to_hex",
    "colour_from_row",
    "assert_u8_pixels",
    "as_pixel_array",
]
