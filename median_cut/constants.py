"""
Defaults and tunables used across the project.

- Palette size defaults (DEFAULT_NUM_COLOURS, MAX_NUM_COLOURS)
- Image loading (ALPHA_THRESHOLD, IMAGE_EXTENSIONS, RESAMPLE_NAMES)
- CLI report (SWATCH_WIDTH)
"""
from __future__ import annotations

from typing import FrozenSet, Tuple

# ============
# Palette size
# ============
DEFAULT_NUM_COLOURS: int = 16
MAX_NUM_COLOURS: int = 256

# =============
# Image loading
# =============
ALPHA_THRESHOLD: int = 127
IMAGE_EXTENSIONS: FrozenSet[str] = frozenset(
    {".png", ".jpg", ".jpeg", ".webp", ".bmp", ".gif"}
)
RESAMPLE_NAMES: Tuple[str, ...] = ("nearest", "bilinear", "bicubic", "lanczos")
DEFAULT_RESAMPLE: str = "bicubic"

# ==========
# CLI report
# ==========
SWATCH_WIDTH: int = 2

__all__ = [
    "DEFAULT_NUM_COLOURS",
    "MAX_NUM_COLOURS",
    "ALPHA_THRESHOLD",
    "IMAGE_EXTENSIONS",
    "RESAMPLE_NAMES",
    "DEFAULT_RESAMPLE",
    "SWATCH_WIDTH",
]
