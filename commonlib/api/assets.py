"""Public asset-registration API contracts."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Protocol, TypeVar, runtime_checkable

TAsset = TypeVar("TAsset")

CandidateSource = Callable[[], Iterable[tuple[str, TAsset]]]
DirectoryPath = str | PathLike[str]


@runtime_checkable
class AssetExtractor[TAsset](Protocol):
    """Decodes one source unit into zero or more keyed candidates."""

    def matches(self, path: Path) -> bool:
        """Return whether a directory entry is a source unit for this kind."""

    def extract(self, source: Path) -> Iterable[tuple[str, TAsset]]:
        """Decode one source unit into `(key, value)` candidates."""


@runtime_checkable
class PublishSink[TAsset](Protocol):
    """Receives each newly admitted asset exactly once."""

    def publish(self, key: str, value: TAsset) -> None:
        """Forward one admitted entry to its consumer."""


class KeyedRegistry[TAsset](ABC):
    """First-write-wins key/value store for one asset kind."""

    @abstractmethod
    def try_admit(self, key: str, value: TAsset) -> bool:
        """Store entry when key is absent and report whether it was stored."""

    @abstractmethod
    def contains(self, key: str) -> bool:
        """Return whether key was admitted."""

    @abstractmethod
    def get(self, key: str) -> TAsset:
        """Return admitted value or raise KeyError."""

    @abstractmethod
    def find(self, key: str) -> TAsset | None:
        """Return admitted value or None."""

    @abstractmethod
    def keys(self) -> tuple[str, ...]:
        """Return admitted keys in admission order."""

    @abstractmethod
    def snapshot(self) -> dict[str, TAsset]:
        """Return a shallow copy of admitted entries."""

    @abstractmethod
    def __len__(self) -> int:
        """Return number of admitted entries."""


@dataclass(frozen=True, slots=True)
class RegistrationStats:
    """Cumulative counters for one registration coordinator."""

    directories: int = 0
    units_scanned: int = 0
    units_failed: int = 0
    admitted: int = 0
    duplicates: int = 0


class DirectoryRegistrar[TAsset](ABC):
    """Tracks processed directories and drives extraction into a registry."""

    @property
    @abstractmethod
    def kind(self) -> str:
        """Asset kind label used in diagnostics."""

    @property
    @abstractmethod
    def registry(self) -> KeyedRegistry[TAsset]:
        """Registry receiving admitted entries."""

    @property
    @abstractmethod
    def registered_directories(self) -> tuple[str, ...]:
        """Processed directories in registration order."""

    @abstractmethod
    def register_directory(self, path: DirectoryPath | None) -> None:
        """Scan a directory once and admit its assets."""

    @abstractmethod
    def register_unit(
        self,
        label: str,
        extract: CandidateSource[TAsset],
        *,
        expected_key: str | None = None,
    ) -> int:
        """Extract and admit one source unit outside a directory scan."""

    @abstractmethod
    def is_registered(self, path: DirectoryPath) -> bool:
        """Return whether a directory was already processed."""

    @abstractmethod
    def stats(self) -> RegistrationStats:
        """Return cumulative registration counters."""


def create_keyed_registry[TValue]() -> KeyedRegistry[TValue]:
    """Create default keyed-registry implementation."""
    from commonlib.assets.registry import RuntimeKeyedRegistry

    return RuntimeKeyedRegistry()


def create_directory_registrar[TValue](
    *,
    kind: str,
    extractor: AssetExtractor[TValue],
    sink: PublishSink[TValue],
    registry: KeyedRegistry[TValue] | None = None,
    verbose_duplicates: bool = False,
    logger: logging.Logger | None = None,
) -> DirectoryRegistrar[TValue]:
    """Create default directory-registration coordinator."""
    from commonlib.assets.coordinator import DirectoryRegistrationCoordinator

    return DirectoryRegistrationCoordinator(
        kind=kind,
        extractor=extractor,
        sink=sink,
        registry=registry,
        verbose_duplicates=verbose_duplicates,
        logger=logger,
    )
