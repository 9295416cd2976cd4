"""Rig layout bundle extractor.

A layout bundle is a zip container of JSON object documents. Each document is
one named object; objects exposing the ``ContainedGridsView`` component are rig
layouts, everything else in the bundle is ignored with a warning.
"""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any

from commonlib.runtime import json_codec
from commonlib.runtime.errors import AssetExtractionError

_LOG = logging.getLogger("commonlib.layouts")

LAYOUT_EXTENSIONS: frozenset[str] = frozenset({".bundle"})
GRID_VIEW_COMPONENT = "ContainedGridsView"


@dataclass(frozen=True, slots=True)
class GridSpec:
    """One container grid inside a rig layout."""

    id: str
    width: int
    height: int

    @property
    def cells(self) -> int:
        return self.width * self.height


@dataclass(frozen=True, slots=True)
class RigLayout:
    """Typed grid view decoded from a bundle object."""

    name: str
    grids: tuple[GridSpec, ...]
    source: str = ""

    @property
    def total_cells(self) -> int:
        return sum(grid.cells for grid in self.grids)


@dataclass(frozen=True, slots=True)
class BundleObject:
    name: str
    components: dict[str, Any] = field(default_factory=dict)


class LayoutBundle:
    """Open bundle container; use through ``open_layout_bundle``."""

    def __init__(self, archive: zipfile.ZipFile, name: str) -> None:
        self._archive = archive
        self._name = name
        self._closed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def closed(self) -> bool:
        return self._closed

    def load_all_objects(self) -> list[BundleObject]:
        """Decode every object document in archive order."""
        if self._closed:
            raise ValueError(f"bundle {self._name} is closed")
        objects: list[BundleObject] = []
        for info in self._archive.infolist():
            if info.is_dir():
                continue
            member = PurePosixPath(info.filename)
            if member.suffix.lower() != ".json":
                continue
            payload = json_codec.loads(self._archive.read(info))
            if not isinstance(payload, dict):
                raise AssetExtractionError(f"bundle object {info.filename} is not a JSON object")
            name = payload.get("name", member.stem)
            components = payload.get("components", {})
            if not isinstance(name, str) or not isinstance(components, dict):
                raise AssetExtractionError(f"bundle object {info.filename} has invalid header")
            objects.append(BundleObject(name=name, components=components))
        return objects

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._archive.close()


@contextmanager
def open_layout_bundle(path: Path) -> Iterator[LayoutBundle]:
    """Open a bundle and release it on exit, including on error."""
    bundle = LayoutBundle(zipfile.ZipFile(path), path.stem)
    try:
        yield bundle
    finally:
        bundle.close()


class LayoutBundleExtractor:
    """Yield `(object_name, RigLayout)` for each grid-view object in a bundle."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._log = logger if logger is not None else _LOG

    def matches(self, path: Path) -> bool:
        return path.suffix.lower() in LAYOUT_EXTENSIONS

    def extract(self, source: Path) -> list[tuple[str, RigLayout]]:
        candidates: list[tuple[str, RigLayout]] = []
        with open_layout_bundle(source) as bundle:
            for obj in bundle.load_all_objects():
                grid_view = obj.components.get(GRID_VIEW_COMPONENT)
                if grid_view is None:
                    self._log.warning(
                        "object %s in bundle %s missing %s",
                        obj.name or "null",
                        bundle.name,
                        GRID_VIEW_COMPONENT,
                    )
                    continue
                try:
                    layout = parse_grid_view(obj.name, grid_view, source=bundle.name)
                except AssetExtractionError as exc:
                    self._log.warning(
                        "object %s in bundle %s has invalid %s: %s",
                        obj.name,
                        bundle.name,
                        GRID_VIEW_COMPONENT,
                        exc,
                    )
                    continue
                candidates.append((obj.name, layout))
        return candidates


def parse_grid_view(name: str, payload: object, *, source: str = "") -> RigLayout:
    """Build a RigLayout from a ``ContainedGridsView`` component payload."""
    if not isinstance(payload, dict):
        raise AssetExtractionError("grid view must be an object")
    raw_grids = payload.get("grids", [])
    if not isinstance(raw_grids, list):
        raise AssetExtractionError("grids must be a list")
    grids: list[GridSpec] = []
    for index, raw in enumerate(raw_grids):
        if not isinstance(raw, dict):
            raise AssetExtractionError(f"grid {index} must be an object")
        grid_id = raw.get("id", f"grid_{index}")
        width = raw.get("width")
        height = raw.get("height")
        if not isinstance(grid_id, str):
            raise AssetExtractionError(f"grid {index} id must be a string")
        if not _positive_int(width) or not _positive_int(height):
            raise AssetExtractionError(f"grid {grid_id} needs positive integer width and height")
        grids.append(GridSpec(id=grid_id, width=int(width), height=int(height)))
    return RigLayout(name=name, grids=tuple(grids), source=source)


def _positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


__all__ = [
    "GRID_VIEW_COMPONENT",
    "LAYOUT_EXTENSIONS",
    "BundleObject",
    "GridSpec",
    "LayoutBundle",
    "LayoutBundleExtractor",
    "RigLayout",
    "open_layout_bundle",
    "parse_grid_view",
]
