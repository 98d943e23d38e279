"""Command-line entry point for the KubeDiag TUI."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from kubediag import __version__
from kubediag.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)
from kubediag.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kubediag",
        description="Diagnose Kubernetes pods and services from the terminal",
    )
    parser.add_argument("--api-url", help="Base URL of the diagnostic API")
    parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds",
    )
    parser.add_argument("--namespace", help="Namespace to select on startup")
    parser.add_argument(
        "--config",
        type=Path,
        help=f"Settings file (default: {ConfigManager.default_path()})",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Log level for the log file",
    )
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_settings(args: argparse.Namespace) -> AppSettings:
    """Merge settings file, environment and command-line flags (flags win)."""
    settings = ConfigManager.load(args.config)
    overrides = {
        "api_base_url": args.api_url,
        "request_timeout_seconds": args.timeout,
        "default_namespace": args.namespace,
        "log_level": args.log_level,
        "log_file": args.log_file,
    }
    for field, value in overrides.items():
        if value is not None:
            setattr(settings, field, value)
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(args)
    except (ConfigLoadError, ValidationError) as exc:
        print(f"kubediag: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level, settings.log_file)
    logger.info("Starting KubeDiag %s against %s", __version__, settings.api_base_url)

    from kubediag.app import KubeDiagApp

    KubeDiagApp(settings=settings).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
