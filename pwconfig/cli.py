# Where: pwconfig/cli.py
# What: Command-line entry point that prints the resolved test-run configuration.
# Why: Let shell-driven runners consume the configuration as JSON, YAML or env lines.
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from pwconfig import constants
from pwconfig.assembler import build_config
from pwconfig.logging_config import LOG_FORMAT_JSON, setup_logging
from pwconfig.serialize import FORMAT_JSON, SUPPORTED_FORMATS, dump_config
from pwconfig.settings import load_settings

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve the browser test-run configuration")
    parser.add_argument(
        constants.HEADED_FLAG,
        dest="headed",
        action="store_true",
        help="Run browsers headed (same as setting PWTEST_HEADED)",
    )
    parser.add_argument(
        "--format",
        choices=SUPPORTED_FORMATS,
        default=FORMAT_JSON,
        help="Output format for the configuration",
    )
    parser.add_argument(
        "--root-dir",
        type=Path,
        default=None,
        help="Repository root holding tests/ and test-results/ (default: cwd)",
    )
    parser.add_argument(
        "--print-env",
        action="store_true",
        help="Print only the KEY=VALUE environment overrides for the runner",
    )
    parser.add_argument(
        "--log-config",
        type=Path,
        default=None,
        help="YAML logging config (default: bundled logging.yml)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Write diagnostics to stderr as JSON lines (same as LOG_FORMAT=json)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(
        args.log_config,
        level="DEBUG" if args.verbose else None,
        fmt=LOG_FORMAT_JSON if args.log_json else None,
    )

    settings = load_settings([constants.HEADED_FLAG] if args.headed else [])
    logger.debug("Resolved run mode: %s", settings.mode.value)
    config = build_config(settings, root_dir=args.root_dir)

    if args.print_env:
        for key, value in sorted(config.env_overrides.items()):
            print(f"{key}={value}")
        return 0

    print(dump_config(config, args.format))
    return 0
