"""Deduplicating asset registration primitives."""

from commonlib.assets.coordinator import DirectoryRegistrationCoordinator
from commonlib.assets.registry import RuntimeKeyedRegistry as AssetRegistry
from commonlib.assets.sink import HostResources, ResourceTable, ResourceTablePublishSink

__all__ = [
    "AssetRegistry",
    "DirectoryRegistrationCoordinator",
    "HostResources",
    "ResourceTable",
    "ResourceTablePublishSink",
]
