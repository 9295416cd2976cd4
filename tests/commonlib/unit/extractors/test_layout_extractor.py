from __future__ import annotations

import logging
from pathlib import Path

import pytest

from commonlib.extractors import layouts
from commonlib.extractors.layouts import (
    GridSpec,
    LayoutBundleExtractor,
    RigLayout,
    open_layout_bundle,
    parse_grid_view,
)
from commonlib.runtime.errors import RECOVERABLE_EXTRACTION_ERRORS


def test_layout_extractor_yields_grid_view_objects(
    tmp_path: Path, make_bundle, grid_object
) -> None:
    bundle = make_bundle(
        tmp_path / "rigs.bundle",
        {
            "rig_a.json": grid_object("rig_a", ("main", 2, 3), ("side", 1, 1)),
            "rig_b.json": grid_object("rig_b", ("main", 4, 4)),
        },
    )

    candidates = LayoutBundleExtractor().extract(bundle)

    assert [name for name, _ in candidates] == ["rig_a", "rig_b"]
    rig_a = candidates[0][1]
    assert rig_a == RigLayout(
        name="rig_a",
        grids=(GridSpec("main", 2, 3), GridSpec("side", 1, 1)),
        source="rigs",
    )
    assert rig_a.total_cells == 7


def test_layout_extractor_skips_objects_without_grid_view(
    tmp_path: Path, make_bundle, grid_object, caplog
) -> None:
    bundle = make_bundle(
        tmp_path / "mixed.bundle",
        {
            "icon.json": {"name": "icon", "components": {"Image": {}}},
            "rig.json": grid_object("rig", ("main", 1, 2)),
            "readme.txt": "not an object document",
        },
    )

    with caplog.at_level(logging.WARNING, logger="commonlib.layouts"):
        candidates = LayoutBundleExtractor().extract(bundle)

    assert [name for name, _ in candidates] == ["rig"]
    assert "object icon in bundle mixed missing ContainedGridsView" in caplog.text


def test_layout_extractor_skips_objects_with_invalid_grids(
    tmp_path: Path, make_bundle, grid_object, caplog
) -> None:
    bundle = make_bundle(
        tmp_path / "bad.bundle",
        {
            "zero.json": grid_object("zero", ("main", 0, 2)),
            "ok.json": grid_object("ok", ("main", 2, 2)),
        },
    )

    with caplog.at_level(logging.WARNING, logger="commonlib.layouts"):
        candidates = LayoutBundleExtractor().extract(bundle)

    assert [name for name, _ in candidates] == ["ok"]
    assert "object zero in bundle bad has invalid ContainedGridsView" in caplog.text


def test_layout_object_name_defaults_to_member_stem(tmp_path: Path, make_bundle) -> None:
    bundle = make_bundle(
        tmp_path / "anon.bundle",
        {"prefabs/rig_c.json": {"components": {"ContainedGridsView": {"grids": []}}}},
    )

    candidates = LayoutBundleExtractor().extract(bundle)

    assert candidates == [("rig_c", RigLayout(name="rig_c", grids=(), source="anon"))]


def test_unreadable_bundle_is_an_extraction_failure(tmp_path: Path) -> None:
    path = tmp_path / "corrupt.bundle"
    path.write_bytes(b"definitely not a zip archive")

    with pytest.raises(RECOVERABLE_EXTRACTION_ERRORS):
        LayoutBundleExtractor().extract(path)


def test_bundle_is_released_even_when_extraction_fails(
    tmp_path: Path, make_bundle, grid_object, monkeypatch
) -> None:
    bundle_path = make_bundle(
        tmp_path / "half.bundle",
        {"ok.json": grid_object("ok", ("main", 1, 1)), "broken.json": "{oops"},
    )
    closed: list[str] = []
    original_close = layouts.LayoutBundle.close

    def _tracking_close(self) -> None:
        closed.append(self.name)
        original_close(self)

    monkeypatch.setattr(layouts.LayoutBundle, "close", _tracking_close)

    with pytest.raises(RECOVERABLE_EXTRACTION_ERRORS):
        LayoutBundleExtractor().extract(bundle_path)

    assert closed == ["half"]


def test_open_layout_bundle_closes_on_exit(tmp_path: Path, make_bundle, grid_object) -> None:
    bundle_path = make_bundle(tmp_path / "rigs.bundle", {"a.json": grid_object("a")})

    with open_layout_bundle(bundle_path) as bundle:
        assert not bundle.closed
        assert [obj.name for obj in bundle.load_all_objects()] == ["a"]

    assert bundle.closed
    with pytest.raises(ValueError):
        bundle.load_all_objects()


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"grids": {}},
        {"grids": ["x"]},
        {"grids": [{"id": 3, "width": 1, "height": 1}]},
        {"grids": [{"id": "a", "width": True, "height": 1}]},
        {"grids": [{"id": "a", "width": 1}]},
    ],
)
def test_parse_grid_view_rejects_malformed_payloads(payload: object) -> None:
    with pytest.raises(layouts.AssetExtractionError):
        parse_grid_view("rig", payload)


def test_layout_extractor_matches_bundle_suffix() -> None:
    extractor = LayoutBundleExtractor()
    assert extractor.matches(Path("rigs.bundle"))
    assert extractor.matches(Path("RIGS.BUNDLE"))
    assert not extractor.matches(Path("rigs.zip"))
