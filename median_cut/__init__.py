"""
median_cut package.

Purpose:
  Median-cut colour quantization: reduce a pixel list to a small palette by
  repeatedly halving buckets of pixels along their widest channel.
  See extract_palette.py for the CLI.

Public API:
  generate_palette         : pixels + target size -> list of Colour.
  generate_palette_entries : same, with the pixel count behind each colour.
  build_buckets            : the partition itself, before reduction.
  core_types               : Colour, Channel, Bucket, PaletteEntry and helpers.
  colour                   : channel selection, component-wise min/max, dominant channel.
  stats                    : channel_range, channel_mean, colour_mean.
  partition                : split_bucket and its steps.
  image_io                 : Pillow-backed loading of image files into pixel lists.
  utils                    : shared formatting and logging helpers.

Quick start:
  from median_cut import generate_palette
  palette = generate_palette([(0, 0, 0), (255, 255, 255)], 2)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import constants
from . import core_types
from . import colour
from . import stats
from . import partition
from . import utils
from . import image_io

from .core_types import Bucket, Channel, Colour, PaletteEntry  # noqa: E402,F401
from .palette import (  # noqa: E402,F401
    build_buckets,
    generate_palette,
    generate_palette_entries,
)

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "colour",
    "stats",
    "partition",
    "utils",
    "image_io",
    "Bucket",
    "Channel",
    "Colour",
    "PaletteEntry",
    "build_buckets",
    "generate_palette",
    "generate_palette_entries",
]
