"""Asset registration for client mods: voices, rig layouts and slot images.

Other mods call these at any time; each directory is scanned once per kind.
"""

from __future__ import annotations

from types import ModuleType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from commonlib.api.assets import DirectoryPath


def register_voice_directory(path: DirectoryPath | None) -> None:
    """Register a directory of `*.json` voice mappings."""
    from commonlib.runtime.bootstrap import get_services

    get_services().voices.register_directory(path)


def register_rig_layout_directory(path: DirectoryPath | None) -> None:
    """Register a directory of `*.bundle` rig layouts."""
    from commonlib.runtime.bootstrap import get_services

    get_services().layouts.register_directory(path)


def register_slot_image_directory(path: DirectoryPath | None) -> None:
    """Register a directory of slot images."""
    from commonlib.runtime.bootstrap import get_services

    get_services().slots.register_directory(path)


def register_slot_image(image_path: DirectoryPath | None, slot_id: str | None = None) -> None:
    """Register one slot image file."""
    from commonlib.runtime.bootstrap import get_services

    get_services().slots.register_slot_image(image_path, slot_id)


def register_slot_image_from_resource(
    package: ModuleType | str | None,
    resource_path: str | None,
    slot_name: str | None = None,
) -> None:
    """Register one slot image shipped as a package resource."""
    from commonlib.runtime.bootstrap import get_services

    get_services().slots.register_slot_image_from_resource(package, resource_path, slot_name)


__all__ = [
    "register_rig_layout_directory",
    "register_slot_image",
    "register_slot_image_directory",
    "register_slot_image_from_resource",
    "register_voice_directory",
]
