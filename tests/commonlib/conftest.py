from __future__ import annotations

import zipfile
from collections.abc import Callable, Iterable
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import orjson
import pytest
from PIL import Image

from commonlib.assets.sink import HostResources
from commonlib.runtime import bootstrap, config


class RecordingSink:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def publish(self, key: str, value: Any) -> None:
        self.calls.append((key, value))


class CountingExtractor:
    """Wraps an extractor and records every unit it was asked to decode."""

    def __init__(self, inner: Any) -> None:
        self._inner = inner
        self.calls: list[Path] = []

    def matches(self, path: Path) -> bool:
        return self._inner.matches(path)

    def extract(self, source: Path) -> Iterable[tuple[str, Any]]:
        self.calls.append(source)
        return self._inner.extract(source)


@pytest.fixture(autouse=True)
def reset_process_state(monkeypatch) -> None:
    monkeypatch.setattr(bootstrap, "_SERVICES", None)
    monkeypatch.setattr(config, "_CONFIG", ContextVar("commonlib_config_test", default=None))


@pytest.fixture
def host() -> HostResources:
    return HostResources()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def counting_extractor() -> Callable[[Any], CountingExtractor]:
    return CountingExtractor


@pytest.fixture
def write_voices() -> Callable[[Path, str, object], Path]:
    def _write(directory: Path, name: str, payload: object) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        if isinstance(payload, (str, bytes)):
            data = payload.encode("utf-8") if isinstance(payload, str) else payload
        else:
            data = orjson.dumps(payload)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def make_bundle() -> Callable[[Path, dict[str, object]], Path]:
    """Write a zip bundle; dict members are JSON encoded, str members written raw."""

    def _make(path: Path, members: dict[str, object]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
            for member, payload in members.items():
                if isinstance(payload, str):
                    zf.writestr(member, payload)
                else:
                    zf.writestr(member, orjson.dumps(payload))
        return path

    return _make


@pytest.fixture
def grid_object() -> Callable[..., dict[str, object]]:
    def _object(name: str, *grids: tuple[str, int, int]) -> dict[str, object]:
        return {
            "name": name,
            "components": {
                "ContainedGridsView": {
                    "grids": [
                        {"id": grid_id, "width": width, "height": height}
                        for grid_id, width, height in grids
                    ]
                }
            },
        }

    return _object


@pytest.fixture
def write_image() -> Callable[..., Path]:
    def _write(
        path: Path,
        size: tuple[int, int] = (4, 2),
        color: tuple[int, int, int, int] = (255, 0, 0, 255),
        image_format: str = "PNG",
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        mode = "RGBA" if image_format == "PNG" else "RGB"
        fill = color if mode == "RGBA" else color[:3]
        Image.new(mode, size, fill).save(path, format=image_format)
        return path

    return _write
