# colour_thief/image_io.py
from __future__ import annotations

import io
from pathlib import Path

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

"""
Image loading helpers: anything Pillow reads becomes an (H, W, 4) uint8 sRGB
array with EXIF orientation applied.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im.convert("RGBA"),
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is None:
                return im.convert("RGBA")
            return im2
        except (ImageCms.PyCMSError, OSError, ValueError):
            return im.convert("RGBA")

    return im.convert("RGBA")


def image_to_rgba(im: Image.Image) -> np.ndarray:
    """Pillow image to a (H, W, 4) uint8 array in sRGB."""
    return np.array(_convert_to_srgb_rgba(im), dtype=np.uint8)


def load_image_rgba(path: Path | str) -> np.ndarray:
    with Image.open(path) as im0:
        im0.load()
        return image_to_rgba(im0)


def is_image_file(path: Path) -> bool:
    try:
        with Image.open(path) as im:
            im.seek(0)
            im.load()
        return True
    except (UnidentifiedImageError, OSError):
        return False


__all__ = [
    "image_to_rgba",
    "load_image_rgba",
    "is_image_file",
]
