"""Centralized configuration for directory layout and diagnostics."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_MOD_DIRECTORY = "WTT-ClientCommonLib"


@dataclass(frozen=True, slots=True)
class DirectoryLayoutConfig:
    plugins_dir: str
    mod_dir: str
    layouts_subdir: str
    slot_images_subdir: str
    voices_subdir: str

    @property
    def mod_root(self) -> Path:
        return Path(self.plugins_dir) / self.mod_dir

    @property
    def layouts_dir(self) -> Path:
        return self.mod_root / self.layouts_subdir

    @property
    def slot_images_dir(self) -> Path:
        return self.mod_root / self.slot_images_subdir

    @property
    def voices_dir(self) -> Path:
        return self.mod_root / self.voices_subdir


@dataclass(frozen=True, slots=True)
class DiagnosticsConfig:
    verbose_duplicates: bool
    log_level: str
    log_format: str
    log_file: str | None


@dataclass(frozen=True, slots=True)
class CommonLibConfig:
    directories: DirectoryLayoutConfig
    diagnostics: DiagnosticsConfig


_CONFIG: ContextVar[CommonLibConfig | None] = ContextVar("commonlib_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _normalize_log_format(raw: str) -> str:
    value = raw.strip().lower()
    return value if value in {"text", "json"} else "text"


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with project-prefixed override."""
    value = _raw("COMMONLIB_LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_config(*, env: Mapping[str, str] | None = None) -> CommonLibConfig:
    default_plugins = str(Path.cwd() / "BepInEx" / "plugins")
    log_file = _text("COMMONLIB_LOG_FILE", "", env=env)
    return CommonLibConfig(
        directories=DirectoryLayoutConfig(
            plugins_dir=_text("COMMONLIB_PLUGINS_DIR", default_plugins, env=env),
            mod_dir=_text("COMMONLIB_MOD_DIR", DEFAULT_MOD_DIRECTORY, env=env),
            layouts_subdir=_text("COMMONLIB_LAYOUTS_SUBDIR", "RigLayouts", env=env),
            slot_images_subdir=_text("COMMONLIB_SLOT_IMAGES_SUBDIR", "SlotImages", env=env),
            voices_subdir=_text("COMMONLIB_VOICES_SUBDIR", "Voices", env=env),
        ),
        diagnostics=DiagnosticsConfig(
            verbose_duplicates=_flag("COMMONLIB_VERBOSE_DUPLICATES", False, env=env),
            log_level=resolve_log_level_name(env=env),
            log_format=_normalize_log_format(_text("COMMONLIB_LOG_FORMAT", "text", env=env)),
            log_file=log_file or None,
        ),
    )


def initialize_config(*, env: Mapping[str, str] | None = None) -> CommonLibConfig:
    config = load_config(env=env)
    _CONFIG.set(config)
    return config


def set_config(config: CommonLibConfig) -> CommonLibConfig:
    _CONFIG.set(config)
    return config


def get_config() -> CommonLibConfig:
    config = _CONFIG.get()
    if config is not None:
        return config
    return initialize_config()


__all__ = [
    "CommonLibConfig",
    "DEFAULT_MOD_DIRECTORY",
    "DiagnosticsConfig",
    "DirectoryLayoutConfig",
    "get_config",
    "initialize_config",
    "load_config",
    "resolve_log_level_name",
    "set_config",
]
