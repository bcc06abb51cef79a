from __future__ import annotations

import io
from pathlib import Path
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .constants import ALPHA_THRESHOLD, DEFAULT_RESAMPLE
from .core_types import U8Image, U8Mask, U8Pixels

"""
Image loading for palette extraction: sRGB RGBA decode via Pillow, optional
height cap, and flattening of visible pixels into an (N,3) list.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]


def pillow_resample_from_name(name: str) -> Image.Resampling:
    """Map a string to a Pillow resampling filter enum."""
    if name == "nearest":
        return Image.Resampling.NEAREST
    if name == "bilinear":
        return Image.Resampling.BILINEAR
    if name == "bicubic":
        return Image.Resampling.BICUBIC
    if name == "lanczos":
        return Image.Resampling.LANCZOS
    return Image.Resampling.BICUBIC  # default


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im,
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is None:
                return im.convert("RGBA")
            return im2
        except (OSError, ImageCms.PyCMSError):
            return im.convert("RGBA")

    return im.convert("RGBA")


def _resize_to_height(
    im: Image.Image, dst_h: Optional[int], resample: Image.Resampling
) -> Image.Image:
    w0, h0 = im.size
    if dst_h is None or dst_h <= 0 or dst_h >= h0:
        return im
    dst_w = max(1, int(round(w0 * (dst_h / float(h0)))))
    return im.resize((dst_w, dst_h), resample=resample)


def load_image_rgba(
    path: Path,
    height: Optional[int] = None,
    resample: str = DEFAULT_RESAMPLE,
) -> Tuple[U8Image, U8Mask]:
    """Load an image with Pillow as sRGB RGBA, optionally capped to height. Returns (rgb, alpha)."""
    with Image.open(path) as im0:
        im = _convert_to_srgb_rgba(im0)
    im = _resize_to_height(im, height, pillow_resample_from_name(resample))
    arr = np.array(im, dtype=np.uint8)
    return arr[..., :3], arr[..., 3]


def visible_pixels(
    rgb: U8Image, alpha: U8Mask, alpha_threshold: int = ALPHA_THRESHOLD
) -> U8Pixels:
    """Flatten rows with alpha >= threshold into a C-contiguous (N,3) array."""
    if not 0 <= int(alpha_threshold) <= 255:
        raise ValueError(
            f"alpha_threshold must be in 0..255, got {alpha_threshold}"
        )
    mask = alpha >= np.uint8(alpha_threshold)
    return np.ascontiguousarray(rgb[mask].reshape(-1, 3), dtype=np.uint8)


def load_pixels(
    path: Path,
    *,
    height: Optional[int] = None,
    resample: str = DEFAULT_RESAMPLE,
    alpha_threshold: int = ALPHA_THRESHOLD,
) -> U8Pixels:
    """
    Load an image file as a flat list of visible pixels.

    Raises ValueError when every pixel is below the alpha threshold.
    """
    rgb, alpha = load_image_rgba(path, height=height, resample=resample)
    pixels = visible_pixels(rgb, alpha, alpha_threshold)
    if pixels.shape[0] == 0:
        raise ValueError("no visible pixels")
    return pixels


def is_image_file(path: Path) -> bool:
    try:
        with Image.open(path) as im:
            im.seek(0)
            im.load()
        return True
    except (UnidentifiedImageError, OSError):
        return False


__all__ = [
    "pillow_resample_from_name",
    "load_image_rgba",
    "visible_pixels",
    "load_pixels",
    "is_image_file",
]
