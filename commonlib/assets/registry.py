"""First-write-wins keyed registry primitives."""

from __future__ import annotations

from threading import Lock

from commonlib.api.assets import KeyedRegistry


class RuntimeKeyedRegistry[TValue](KeyedRegistry[TValue]):
    """Registry that admits each key once and never overwrites it."""

    def __init__(self) -> None:
        self._entries: dict[str, TValue] = {}
        self._lock = Lock()

    def try_admit(self, key: str, value: TValue) -> bool:
        """Store entry if key is absent; return False without mutation otherwise."""
        if not key:
            raise ValueError("registry key must not be empty")
        with self._lock:
            if key in self._entries:
                return False
            self._entries[key] = value
            return True

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def get(self, key: str) -> TValue:
        """Return admitted value for key."""
        with self._lock:
            try:
                return self._entries[key]
            except KeyError:
                raise KeyError(f"asset not registered: {key}") from None

    def find(self, key: str) -> TValue | None:
        with self._lock:
            return self._entries.get(key)

    def keys(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._entries)

    def snapshot(self) -> dict[str, TValue]:
        with self._lock:
            return dict(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
