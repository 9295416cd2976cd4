from __future__ import annotations

import logging
from pathlib import Path

import pytest

from commonlib.api.managers import RIG_LAYOUT_PREFIX, create_rig_layout_manager
from commonlib.assets.sink import ResourceTable
from commonlib.extractors.layouts import RigLayout


def test_rig_layouts_are_published_under_ui_prefix(
    tmp_path: Path, make_bundle, grid_object
) -> None:
    make_bundle(tmp_path / "rigs.bundle", {"rig.json": grid_object("rig_alpha", ("main", 2, 2))})
    table = ResourceTable("cached_resources")
    manager = create_rig_layout_manager(table)

    manager.register_directory(tmp_path)

    layout = manager.get("rig_alpha")
    assert isinstance(layout, RigLayout)
    assert table.get(f"{RIG_LAYOUT_PREFIX}rig_alpha") is layout
    assert table.keys() == ("UI/Rig Layouts/rig_alpha",)


def test_corrupt_bundle_does_not_block_other_bundles(
    tmp_path: Path, make_bundle, grid_object, caplog
) -> None:
    make_bundle(tmp_path / "good.bundle", {"a.json": grid_object("rig_a", ("main", 1, 1))})
    (tmp_path / "corrupt.bundle").write_bytes(b"garbage")
    make_bundle(tmp_path / "more.bundle", {"b.json": grid_object("rig_b", ("main", 1, 1))})
    manager = create_rig_layout_manager(ResourceTable("cached_resources"))

    with caplog.at_level(logging.WARNING, logger="commonlib.layouts"):
        manager.register_directory(tmp_path)

    assert sorted(manager.keys()) == ["rig_a", "rig_b"]
    assert "corrupt.bundle" in caplog.text
    assert manager.stats().units_failed == 1


def test_duplicate_layout_names_across_bundles_keep_first(
    tmp_path: Path, make_bundle, grid_object
) -> None:
    make_bundle(tmp_path / "one" / "a.bundle", {"r.json": grid_object("rig", ("first", 1, 1))})
    make_bundle(tmp_path / "two" / "b.bundle", {"r.json": grid_object("rig", ("second", 9, 9))})
    table = ResourceTable("cached_resources")
    manager = create_rig_layout_manager(table)

    manager.register_directory(tmp_path / "one")
    manager.register_directory(tmp_path / "two")

    assert manager.get("rig").grids[0].id == "first"
    assert len(table) == 1


def _rewrite_central_directory(
    path: Path, *, flag_bits: int = 0, compress_type: int | None = None
) -> None:
    data = bytearray(path.read_bytes())
    offset = data.find(b"PK\x01\x02")
    while offset != -1:
        data[offset + 8] |= flag_bits
        if compress_type is not None:
            data[offset + 10 : offset + 12] = compress_type.to_bytes(2, "little")
        offset = data.find(b"PK\x01\x02", offset + 4)
    path.write_bytes(bytes(data))


@pytest.mark.parametrize(
    "rewrite",
    [
        {"flag_bits": 0x01},
        {"compress_type": 99},
    ],
    ids=["encrypted-member", "unsupported-compression"],
)
def test_unreadable_bundle_member_fails_only_its_bundle(
    tmp_path: Path, make_bundle, grid_object, rewrite, caplog
) -> None:
    bad = make_bundle(
        tmp_path / "a_locked.bundle", {"x.json": grid_object("rig_x", ("main", 1, 1))}
    )
    _rewrite_central_directory(bad, **rewrite)
    make_bundle(tmp_path / "b_good.bundle", {"y.json": grid_object("rig_y", ("main", 2, 1))})
    manager = create_rig_layout_manager(ResourceTable("cached_resources"))

    with caplog.at_level(logging.WARNING, logger="commonlib.layouts"):
        manager.register_directory(tmp_path)

    assert manager.keys() == ("rig_y",)
    assert manager.stats().units_failed == 1
    assert "a_locked.bundle" in caplog.text
