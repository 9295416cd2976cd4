"""Per-kind asset extractors."""

from commonlib.extractors.images import SlotImageExtractor, SlotSprite, decode_sprite
from commonlib.extractors.layouts import (
    GridSpec,
    LayoutBundleExtractor,
    RigLayout,
    open_layout_bundle,
)
from commonlib.extractors.voices import JsonMapExtractor

__all__ = [
    "GridSpec",
    "JsonMapExtractor",
    "LayoutBundleExtractor",
    "RigLayout",
    "SlotImageExtractor",
    "SlotSprite",
    "decode_sprite",
    "open_layout_bundle",
]
