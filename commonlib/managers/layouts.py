"""Rig layout registration facade."""

from __future__ import annotations

import logging

from commonlib.api.managers import RIG_LAYOUT_PREFIX, RigLayoutManagerAPI
from commonlib.assets.sink import ResourceTable
from commonlib.extractors.layouts import LayoutBundleExtractor, RigLayout
from commonlib.managers.base import CoordinatedManager

_LOG = logging.getLogger("commonlib.layouts")


class RigLayoutManager(CoordinatedManager[RigLayout], RigLayoutManagerAPI):
    """Loads `*.bundle` rig layouts and publishes them under ``UI/Rig Layouts/``."""

    def __init__(self, table: ResourceTable, *, verbose_duplicates: bool = False) -> None:
        super().__init__(
            kind="rig layout",
            extractor=LayoutBundleExtractor(logger=_LOG),
            table=table,
            prefix=RIG_LAYOUT_PREFIX,
            verbose_duplicates=verbose_duplicates,
            logger=_LOG,
        )
