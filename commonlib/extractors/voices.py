"""Voice mapping extractor: one JSON object of string keys to string values."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from commonlib.runtime import json_codec
from commonlib.runtime.errors import AssetExtractionError

VOICE_EXTENSIONS: frozenset[str] = frozenset({".json"})


class JsonMapExtractor:
    """Decode a whole `*.json` file into `(voice_key, resource_path)` candidates.

    A file is accepted or rejected as a unit: a syntax error, a non-object top
    level or any non-string value fails the whole file.
    """

    def matches(self, path: Path) -> bool:
        return path.suffix.lower() in VOICE_EXTENSIONS

    def extract(self, source: Path) -> Iterator[tuple[str, str]]:
        payload = json_codec.loads(source.read_bytes())
        if not isinstance(payload, dict):
            raise AssetExtractionError(
                f"expected a JSON object, got {type(payload).__name__}"
            )
        entries: list[tuple[str, str]] = []
        for key, value in payload.items():
            if not isinstance(value, str):
                raise AssetExtractionError(
                    f"voice key {key!r} maps to {type(value).__name__}, expected string"
                )
            entries.append((key, value))
        return iter(entries)


__all__ = ["JsonMapExtractor", "VOICE_EXTENSIONS"]
