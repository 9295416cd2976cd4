"""Process-wide service composition and default directory registration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock

from commonlib.api.managers import (
    RigLayoutManagerAPI,
    SlotImageManagerAPI,
    VoiceManagerAPI,
    create_rig_layout_manager,
    create_slot_image_manager,
    create_voice_manager,
)
from commonlib.assets.sink import HostResources
from commonlib.runtime.config import CommonLibConfig, get_config

_LOG = logging.getLogger("commonlib.runtime")

_SERVICES: "CommonLibServices | None" = None
_SERVICES_LOCK = Lock()


@dataclass(frozen=True, slots=True)
class CommonLibServices:
    """One facade per asset kind plus the host tables they publish into."""

    host: HostResources
    voices: VoiceManagerAPI
    layouts: RigLayoutManagerAPI
    slots: SlotImageManagerAPI


def build_services(
    config: CommonLibConfig | None = None, host: HostResources | None = None
) -> CommonLibServices:
    """Build an independent service set; voices publish to resource keys, UI assets to the cache."""
    cfg = config if config is not None else get_config()
    resources = host if host is not None else HostResources()
    verbose = cfg.diagnostics.verbose_duplicates
    return CommonLibServices(
        host=resources,
        voices=create_voice_manager(resources.resource_keys, verbose_duplicates=verbose),
        layouts=create_rig_layout_manager(resources.cached_resources, verbose_duplicates=verbose),
        slots=create_slot_image_manager(resources.cached_resources, verbose_duplicates=verbose),
    )


def initialize_services(
    config: CommonLibConfig | None = None, host: HostResources | None = None
) -> CommonLibServices:
    """Create the process-wide services once; later calls return the existing set."""
    global _SERVICES

    with _SERVICES_LOCK:
        if _SERVICES is None:
            _SERVICES = build_services(config, host)
        elif config is not None or host is not None:
            _LOG.debug("services already initialized; ignoring new config/host")
        return _SERVICES


def get_services() -> CommonLibServices:
    return initialize_services()


def register_default_directories(
    services: CommonLibServices, config: CommonLibConfig | None = None
) -> None:
    """Register the mod's own asset directories: layouts, slot images, then voices."""
    cfg = config if config is not None else get_config()
    layout = cfg.directories
    _LOG.info("registering default asset directories root=%s", layout.mod_root)
    services.layouts.register_directory(layout.layouts_dir)
    services.slots.register_directory(layout.slot_images_dir)
    services.voices.register_directory(layout.voices_dir)


__all__ = [
    "CommonLibServices",
    "build_services",
    "get_services",
    "initialize_services",
    "register_default_directories",
]
