"""JSON codec helpers backed by orjson."""

from __future__ import annotations

from typing import Any

import orjson

_UTF8_BOM = b"\xef\xbb\xbf"


def loads(data: bytes | bytearray | memoryview | str) -> Any:
    """Decode a JSON document; a leading UTF-8 byte order mark is ignored."""
    if isinstance(data, str):
        return orjson.loads(data.removeprefix("\ufeff"))
    raw = bytes(data)
    return orjson.loads(raw.removeprefix(_UTF8_BOM))


def dumps_text(payload: Any) -> str:
    """Serialize payload to JSON text."""
    return orjson.dumps(payload, default=str).decode("utf-8")


__all__ = ["dumps_text", "loads"]
