"""Env-file loading for host launches."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (".env.commonlib", ".env.commonlib.local")
_QUOTES = frozenset({"'", '"'})


def _parse_assignment(raw_line: str) -> tuple[str, str] | None:
    line = raw_line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, _, value = line.partition("=")
    key, value = key.strip(), value.strip()
    if not key:
        return None
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        value = value[1:-1]
    return key, value


def load_env_file(path: str | Path, *, override_existing: bool = True) -> None:
    """Apply ``KEY=VALUE`` lines from ``path`` to ``os.environ``; a missing file is skipped."""
    env_path = Path(path)
    if not env_path.is_file():
        return
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        assignment = _parse_assignment(raw_line)
        if assignment is None:
            continue
        key, value = assignment
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str | Path] | None = None
) -> None:
    """Load ``.env.commonlib`` then ``.env.commonlib.local``; later files win."""
    for path in paths if paths is not None else DEFAULT_ENV_FILES:
        load_env_file(path, override_existing=override_existing)


__all__ = ["DEFAULT_ENV_FILES", "load_default_env_files", "load_env_file"]
