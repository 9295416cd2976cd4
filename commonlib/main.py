"""Command-line entry point: register asset directories and report results."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from commonlib.api.logging import LoggingConfig, configure_logging, get_logger
from commonlib.runtime.bootstrap import (
    CommonLibServices,
    initialize_services,
    register_default_directories,
)
from commonlib.runtime.config import initialize_config
from commonlib.runtime.env_files import load_default_env_files
from commonlib.runtime.logging import shutdown_logging

logger = get_logger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Register client mod asset directories.")
    parser.add_argument("--voices", action="append", default=[], metavar="DIR")
    parser.add_argument("--layouts", action="append", default=[], metavar="DIR")
    parser.add_argument("--slots", action="append", default=[], metavar="DIR")
    parser.add_argument(
        "--skip-defaults",
        action="store_true",
        help="Do not register the mod's own RigLayouts/SlotImages/Voices directories.",
    )
    return parser.parse_args(argv)


def summarize(services: CommonLibServices) -> dict[str, dict[str, int]]:
    """Return per-kind counters for reporting."""
    summary: dict[str, dict[str, int]] = {}
    for name, manager in (
        ("voices", services.voices),
        ("layouts", services.layouts),
        ("slots", services.slots),
    ):
        stats = manager.stats()
        summary[name] = {
            "directories": stats.directories,
            "units_scanned": stats.units_scanned,
            "units_failed": stats.units_failed,
            "admitted": stats.admitted,
            "duplicates": stats.duplicates,
        }
    return summary


def main(argv: Sequence[str] | None = None) -> int:
    """Register configured directories and print a summary line per kind."""
    args = _parse_args(argv)
    load_default_env_files(override_existing=False)
    config = initialize_config()
    configure_logging(
        LoggingConfig(
            level_name=config.diagnostics.log_level,
            console_format=config.diagnostics.log_format,
            file_path=config.diagnostics.log_file,
        )
    )
    try:
        services = initialize_services(config)
        if not args.skip_defaults:
            register_default_directories(services, config)
        for path in args.layouts:
            services.layouts.register_directory(path)
        for path in args.slots:
            services.slots.register_directory(path)
        for path in args.voices:
            services.voices.register_directory(path)
        summary = summarize(services)
        logger.info("registration_summary", extra={"summary": summary})
    finally:
        shutdown_logging()
    for name, counters in summary.items():
        fields = " ".join(f"{key}={value}" for key, value in counters.items())
        print(f"{name}: {fields}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
