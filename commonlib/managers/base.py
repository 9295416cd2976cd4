"""Shared facade plumbing over one directory-registration coordinator."""

from __future__ import annotations

import logging

from commonlib.api.assets import (
    AssetExtractor,
    DirectoryPath,
    DirectoryRegistrar,
    RegistrationStats,
    create_directory_registrar,
)
from commonlib.assets.sink import ResourceTable, ResourceTablePublishSink


class CoordinatedManager[TValue]:
    """Binds an extractor, a registry and a publish sink into one coordinator."""

    def __init__(
        self,
        *,
        kind: str,
        extractor: AssetExtractor[TValue],
        table: ResourceTable,
        prefix: str = "",
        verbose_duplicates: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self._log = logger if logger is not None else logging.getLogger(f"commonlib.{kind}")
        self._coordinator: DirectoryRegistrar[TValue] = create_directory_registrar(
            kind=kind,
            extractor=extractor,
            sink=ResourceTablePublishSink(table, prefix=prefix),
            verbose_duplicates=verbose_duplicates,
            logger=self._log,
        )

    @property
    def coordinator(self) -> DirectoryRegistrar[TValue]:
        return self._coordinator

    def register_directory(self, path: DirectoryPath | None) -> None:
        self._coordinator.register_directory(path)

    def contains(self, key: str) -> bool:
        return self._coordinator.registry.contains(key)

    def get(self, key: str) -> TValue:
        return self._coordinator.registry.get(key)

    def keys(self) -> tuple[str, ...]:
        return self._coordinator.registry.keys()

    def stats(self) -> RegistrationStats:
        return self._coordinator.stats()
