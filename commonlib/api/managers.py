"""Public registration facade contracts for voices, rig layouts and slot images."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import ModuleType
from typing import TYPE_CHECKING

from commonlib.api.assets import DirectoryPath, RegistrationStats

if TYPE_CHECKING:
    from commonlib.assets.sink import ResourceTable
    from commonlib.extractors.images import SlotSprite
    from commonlib.extractors.layouts import RigLayout

RIG_LAYOUT_PREFIX = "UI/Rig Layouts/"
SLOT_IMAGE_PREFIX = "Slots/"


class AssetManager[TValue](ABC):
    """Per-kind facade other components and mods call."""

    @abstractmethod
    def register_directory(self, path: DirectoryPath | None) -> None:
        """Register a directory and load its assets immediately."""

    @abstractmethod
    def contains(self, key: str) -> bool:
        """Return whether an asset key was registered."""

    @abstractmethod
    def get(self, key: str) -> TValue:
        """Return a registered asset or raise KeyError."""

    @abstractmethod
    def keys(self) -> tuple[str, ...]:
        """Return registered asset keys in admission order."""

    @abstractmethod
    def stats(self) -> RegistrationStats:
        """Return cumulative registration counters."""


class VoiceManagerAPI(AssetManager[str], ABC):
    """Voice key to resource path registrations."""


class RigLayoutManagerAPI(AssetManager["RigLayout"], ABC):
    """Rig layout registrations."""


class SlotImageManagerAPI(AssetManager["SlotSprite"], ABC):
    """Slot image registrations, by directory or one image at a time."""

    @abstractmethod
    def register_slot_image(self, image_path: DirectoryPath | None, slot_id: str | None = None) -> None:
        """Register one image file; slot id defaults to the file stem."""

    @abstractmethod
    def register_slot_image_from_resource(
        self,
        package: ModuleType | str | None,
        resource_path: str | None,
        slot_name: str | None = None,
    ) -> None:
        """Register one image packaged as a resource of an importable package."""


def create_voice_manager(
    table: "ResourceTable", *, verbose_duplicates: bool = False
) -> VoiceManagerAPI:
    """Create default voice manager publishing into ``table``."""
    from commonlib.managers.voices import VoiceManager

    return VoiceManager(table, verbose_duplicates=verbose_duplicates)


def create_rig_layout_manager(
    table: "ResourceTable", *, verbose_duplicates: bool = False
) -> RigLayoutManagerAPI:
    """Create default rig layout manager publishing into ``table``."""
    from commonlib.managers.layouts import RigLayoutManager

    return RigLayoutManager(table, verbose_duplicates=verbose_duplicates)


def create_slot_image_manager(
    table: "ResourceTable", *, verbose_duplicates: bool = False
) -> SlotImageManagerAPI:
    """Create default slot image manager publishing into ``table``."""
    from commonlib.managers.slots import SlotImageManager

    return SlotImageManager(table, verbose_duplicates=verbose_duplicates)
