"""Directory registration coordinator shared by every asset kind."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from threading import RLock

from commonlib.api.assets import (
    AssetExtractor,
    CandidateSource,
    DirectoryPath,
    DirectoryRegistrar,
    KeyedRegistry,
    PublishSink,
    RegistrationStats,
)
from commonlib.assets.registry import RuntimeKeyedRegistry
from commonlib.runtime.errors import (
    RECOVERABLE_EXTRACTION_ERRORS,
    RECOVERABLE_PUBLISH_ERRORS,
    log_recoverable,
)

_LOG = logging.getLogger("commonlib.assets")


@dataclass(slots=True)
class _Counters:
    directories: int = 0
    units_scanned: int = 0
    units_failed: int = 0
    admitted: int = 0
    duplicates: int = 0


class DirectoryRegistrationCoordinator[TValue](DirectoryRegistrar[TValue]):
    """Scans each directory once and admits extracted assets first-write-wins.

    One lock guards the registered-directory set and the whole
    check-add-scan-admit-publish sequence, so concurrent callers of the same
    coordinator never interleave. Coordinators of different kinds never contend.
    """

    def __init__(
        self,
        *,
        kind: str,
        extractor: AssetExtractor[TValue],
        sink: PublishSink[TValue],
        registry: KeyedRegistry[TValue] | None = None,
        verbose_duplicates: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        normalized = kind.strip()
        if not normalized:
            raise ValueError("kind must not be empty")
        self._kind = normalized
        self._extractor = extractor
        self._sink = sink
        self._registry: KeyedRegistry[TValue] = (
            registry if registry is not None else RuntimeKeyedRegistry()
        )
        self._verbose_duplicates = bool(verbose_duplicates)
        self._log = logger if logger is not None else _LOG
        self._lock = RLock()
        self._directories: dict[str, None] = {}
        self._counters = _Counters()

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def registry(self) -> KeyedRegistry[TValue]:
        return self._registry

    @property
    def registered_directories(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._directories)

    def is_registered(self, path: DirectoryPath) -> bool:
        normalized = _normalize_directory(path)
        with self._lock:
            return normalized in self._directories

    def stats(self) -> RegistrationStats:
        with self._lock:
            c = self._counters
            return RegistrationStats(
                directories=c.directories,
                units_scanned=c.units_scanned,
                units_failed=c.units_failed,
                admitted=c.admitted,
                duplicates=c.duplicates,
            )

    def register_directory(self, path: DirectoryPath | None) -> None:
        """Register a directory once and admit every asset found in it."""
        if path is None or not str(path).strip():
            self._log.warning("invalid or missing %s path: %r", self._kind, path)
            return
        directory = Path(path)
        with self._lock:
            if not directory.is_dir():
                self._log.warning("invalid or missing %s path: %s", self._kind, directory)
                return
            normalized = _normalize_directory(directory)
            if normalized in self._directories:
                return
            self._directories[normalized] = None
            self._counters.directories += 1
            self._scan(Path(normalized))

    def register_unit(
        self,
        label: str,
        extract: CandidateSource[TValue],
        *,
        expected_key: str | None = None,
    ) -> int:
        """Admit candidates from one unit; skip extraction when expected_key is known."""
        with self._lock:
            if expected_key is not None and self._registry.contains(expected_key):
                self._note_duplicate(expected_key, label)
                return 0
            return self._process_unit(label, extract)

    def _scan(self, directory: Path) -> None:
        try:
            units = self._enumerate_units(directory)
        except OSError:
            log_recoverable(self._log, "failed to enumerate %s directory %s", self._kind, directory)
            return
        admitted = 0
        for unit in units:
            admitted += self._process_unit(
                str(unit), lambda unit=unit: self._extractor.extract(unit)
            )
        self._log.info(
            "registered %s directory %s units=%d admitted=%d",
            self._kind,
            directory,
            len(units),
            admitted,
        )

    def _enumerate_units(self, directory: Path) -> list[Path]:
        units: list[Path] = []
        with os.scandir(directory) as entries:
            for entry in entries:
                if not entry.is_file():
                    continue
                candidate = Path(entry.path)
                if self._extractor.matches(candidate):
                    units.append(candidate)
        return units

    def _process_unit(self, label: str, extract: CandidateSource[TValue]) -> int:
        self._counters.units_scanned += 1
        try:
            candidates = list(extract())
        except RECOVERABLE_EXTRACTION_ERRORS as exc:
            self._counters.units_failed += 1
            log_recoverable(self._log, "error processing %s %s: %s", self._kind, label, exc)
            return 0
        admitted = 0
        for key, value in candidates:
            if not key:
                self._log.warning("skipped %s entry with empty key in %s", self._kind, label)
                continue
            if not self._registry.try_admit(key, value):
                self._note_duplicate(key, label)
                continue
            admitted += 1
            self._counters.admitted += 1
            self._publish(key, value, label)
        return admitted

    def _publish(self, key: str, value: TValue, label: str) -> None:
        try:
            self._sink.publish(key, value)
        except RECOVERABLE_PUBLISH_ERRORS:
            log_recoverable(
                self._log,
                "publish failed %s key=%s source=%s",
                self._kind,
                key,
                label,
                level=logging.ERROR,
            )
            return
        self._log.debug("added %s key=%s source=%s", self._kind, key, label)

    def _note_duplicate(self, key: str, label: str) -> None:
        self._counters.duplicates += 1
        if self._verbose_duplicates:
            self._log.debug("skipped duplicate %s key=%s source=%s", self._kind, key, label)


def _normalize_directory(path: DirectoryPath) -> str:
    return str(Path(path).resolve())


__all__ = ["DirectoryRegistrationCoordinator"]
