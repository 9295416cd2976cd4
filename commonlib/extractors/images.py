"""Slot image extractor: decode raster files into RGBA sprites."""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

from commonlib.runtime.errors import AssetExtractionError

SLOT_IMAGE_EXTENSIONS: frozenset[str] = frozenset({".png", ".jpg", ".jpeg", ".bmp"})
DEFAULT_PIVOT: tuple[float, float] = (0.5, 0.5)
DEFAULT_PIXELS_PER_UNIT = 100.0


@dataclass(frozen=True, slots=True, eq=False)
class SlotSprite:
    """Decoded slot image with RGBA pixels of shape ``(height, width, 4)``."""

    name: str
    width: int
    height: int
    pixels: np.ndarray
    pivot: tuple[float, float] = DEFAULT_PIVOT
    pixels_per_unit: float = DEFAULT_PIXELS_PER_UNIT


def decode_sprite(data: bytes, name: str) -> SlotSprite:
    """Decode image bytes into a sprite; raise on empty or corrupt data."""
    if not data:
        raise AssetExtractionError(f"failed to create texture for {name}: empty image data")
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            rgba = image.convert("RGBA")
    except Image.DecompressionBombError as exc:
        raise AssetExtractionError(f"failed to create texture for {name}: {exc}") from exc
    pixels = np.asarray(rgba, dtype=np.uint8)
    pixels.setflags(write=False)
    height, width = int(pixels.shape[0]), int(pixels.shape[1])
    return SlotSprite(name=name, width=width, height=height, pixels=pixels)


class SlotImageExtractor:
    """Yield one `(file_stem, SlotSprite)` candidate per allow-listed image file."""

    def matches(self, path: Path) -> bool:
        return path.suffix.lower() in SLOT_IMAGE_EXTENSIONS

    def extract(self, source: Path) -> list[tuple[str, SlotSprite]]:
        return [(source.stem, decode_sprite(source.read_bytes(), source.stem))]

    def decode(self, data: bytes, name: str) -> SlotSprite:
        return decode_sprite(data, name)


__all__ = [
    "DEFAULT_PIVOT",
    "DEFAULT_PIXELS_PER_UNIT",
    "SLOT_IMAGE_EXTENSIONS",
    "SlotImageExtractor",
    "SlotSprite",
    "decode_sprite",
]
