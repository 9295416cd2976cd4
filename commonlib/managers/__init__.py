"""Per-kind registration facades."""

from commonlib.managers.layouts import RigLayoutManager
from commonlib.managers.slots import SlotImageManager
from commonlib.managers.voices import VoiceManager

__all__ = ["RigLayoutManager", "SlotImageManager", "VoiceManager"]
