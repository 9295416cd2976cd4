"""Voice line registration facade."""

from __future__ import annotations

import logging

from commonlib.api.managers import VoiceManagerAPI
from commonlib.assets.sink import ResourceTable
from commonlib.extractors.voices import JsonMapExtractor
from commonlib.managers.base import CoordinatedManager

_LOG = logging.getLogger("commonlib.voices")


class VoiceManager(CoordinatedManager[str], VoiceManagerAPI):
    """Loads `*.json` voice mappings and publishes keys unprefixed."""

    def __init__(self, table: ResourceTable, *, verbose_duplicates: bool = False) -> None:
        super().__init__(
            kind="voice",
            extractor=JsonMapExtractor(),
            table=table,
            verbose_duplicates=verbose_duplicates,
            logger=_LOG,
        )
