"""Host resource tables and the publish sink that forwards into them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import Lock
from typing import Any

from commonlib.runtime.errors import RECOVERABLE_PUBLISH_ERRORS, log_recoverable

_LOG = logging.getLogger("commonlib.resources")


class ResourceTable:
    """Process-wide key/value table owned by the host application."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._entries: dict[str, Any] = {}
        self._lock = Lock()

    @property
    def name(self) -> str:
        return self._name

    def add_entry(self, key: str, value: Any) -> bool:
        """Insert entry unless key is taken; duplicates are logged and ignored."""
        with self._lock:
            if key in self._entries:
                duplicate = True
            else:
                self._entries[key] = value
                duplicate = False
        if duplicate:
            _LOG.warning("duplicate key ignored table=%s key=%s", self._name, key)
            return False
        _LOG.debug("registered table=%s key=%s", self._name, key)
        return True

    def get(self, key: str) -> Any | None:
        with self._lock:
            return self._entries.get(key)

    def keys(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


@dataclass(frozen=True, slots=True)
class HostResources:
    """Host-owned tables that registration publishes into."""

    resource_keys: ResourceTable = field(default_factory=lambda: ResourceTable("resource_keys"))
    cached_resources: ResourceTable = field(
        default_factory=lambda: ResourceTable("cached_resources")
    )


class ResourceTablePublishSink:
    """Publish sink writing admitted entries into a host table under a key prefix."""

    def __init__(self, table: ResourceTable, *, prefix: str = "") -> None:
        self._table = table
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def publish(self, key: str, value: Any) -> None:
        resource_key = f"{self._prefix}{key}"
        try:
            self._table.add_entry(resource_key, value)
        except RECOVERABLE_PUBLISH_ERRORS:
            log_recoverable(
                _LOG,
                "publish_failed table=%s key=%s",
                self._table.name,
                resource_key,
                level=logging.ERROR,
            )


__all__ = ["HostResources", "ResourceTable", "ResourceTablePublishSink"]
