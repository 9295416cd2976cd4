"""Public registration API contracts."""

from commonlib.api.assets import (
    AssetExtractor,
    DirectoryRegistrar,
    KeyedRegistry,
    PublishSink,
    RegistrationStats,
    create_directory_registrar,
    create_keyed_registry,
)
from commonlib.api.logging import LoggingConfig, configure_logging, get_logger
from commonlib.api.managers import (
    RIG_LAYOUT_PREFIX,
    SLOT_IMAGE_PREFIX,
    AssetManager,
    RigLayoutManagerAPI,
    SlotImageManagerAPI,
    VoiceManagerAPI,
    create_rig_layout_manager,
    create_slot_image_manager,
    create_voice_manager,
)

__all__ = [
    "AssetExtractor",
    "AssetManager",
    "DirectoryRegistrar",
    "KeyedRegistry",
    "LoggingConfig",
    "PublishSink",
    "RIG_LAYOUT_PREFIX",
    "RegistrationStats",
    "RigLayoutManagerAPI",
    "SLOT_IMAGE_PREFIX",
    "SlotImageManagerAPI",
    "VoiceManagerAPI",
    "configure_logging",
    "create_directory_registrar",
    "create_keyed_registry",
    "create_rig_layout_manager",
    "create_slot_image_manager",
    "create_voice_manager",
    "get_logger",
]
