"""Slot image registration facade."""

from __future__ import annotations

import logging
from importlib import import_module, resources
from pathlib import Path, PurePosixPath
from types import ModuleType

from commonlib.api.assets import DirectoryPath
from commonlib.api.managers import SLOT_IMAGE_PREFIX, SlotImageManagerAPI
from commonlib.assets.sink import ResourceTable
from commonlib.extractors.images import SlotImageExtractor, SlotSprite
from commonlib.managers.base import CoordinatedManager

_LOG = logging.getLogger("commonlib.slots")

# Failures resolving a caller-supplied package or resource handle.
_RESOURCE_ERRORS: tuple[type[BaseException], ...] = (
    ImportError,
    OSError,
    ValueError,
    TypeError,
    AttributeError,
)


class SlotImageManager(CoordinatedManager[SlotSprite], SlotImageManagerAPI):
    """Loads slot images and publishes them under ``Slots/``.

    Besides directory scans, single images can be registered from a file or
    from a resource shipped inside an importable package. All paths share one
    registry, so a slot name is decoded and published at most once.
    """

    def __init__(self, table: ResourceTable, *, verbose_duplicates: bool = False) -> None:
        self._extractor = SlotImageExtractor()
        super().__init__(
            kind="slot image",
            extractor=self._extractor,
            table=table,
            prefix=SLOT_IMAGE_PREFIX,
            verbose_duplicates=verbose_duplicates,
            logger=_LOG,
        )

    def register_slot_image(
        self, image_path: DirectoryPath | None, slot_id: str | None = None
    ) -> None:
        if image_path is None or not str(image_path).strip() or not Path(image_path).is_file():
            self._log.warning("invalid or missing image file: %r", image_path)
            return
        path = Path(image_path)
        slot_name = slot_id or path.stem
        self.coordinator.register_unit(
            str(path),
            lambda: [(slot_name, self._extractor.decode(path.read_bytes(), slot_name))],
            expected_key=slot_name,
        )

    def register_slot_image_from_resource(
        self,
        package: ModuleType | str | None,
        resource_path: str | None,
        slot_name: str | None = None,
    ) -> None:
        if package is None or not resource_path or not resource_path.strip():
            self._log.warning("invalid parameters for resource loading")
            return
        package_name = package if isinstance(package, str) else package.__name__
        try:
            resource = resources.files(import_module(package_name)).joinpath(resource_path)
            found = resource.is_file()
        except _RESOURCE_ERRORS as exc:
            self._log.warning("error loading resource %s from %s: %s", resource_path, package_name, exc)
            return
        if not found:
            self._log.warning("resource %s not found in %s", resource_path, package_name)
            return
        key = slot_name or PurePosixPath(resource_path).stem
        self.coordinator.register_unit(
            f"{package_name}:{resource_path}",
            lambda: [(key, self._extractor.decode(resource.read_bytes(), key))],
            expected_key=key,
        )
