#!/usr/bin/env python3
"""
Common utilities shared across audit-html entry points.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from audit_html.constants import (
    DEFAULT_REPORT_TITLE,
    ENV_FILE_NAME,
    ENV_OUTPUT_DIR,
    ENV_TITLE,
    LOG_FORMAT,
)


def setup_logging(log_level: str | int = "INFO", log_file: str | None = None) -> None:
    """Setup logging configuration consistently across scripts.

    Console output goes to stderr so stdout stays free for the status message.

    Args:
        log_level: Logging level as string ("INFO", "DEBUG") or integer constant
        log_file: Optional path to log file for file output
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        # Ensure parent directory exists if a custom path is provided
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            logging.getLogger(__name__).warning(
                "Cannot create log directory for %s; logging to console only", log_file
            )
        else:
            handlers.append(logging.FileHandler(log_file))

    # Handle both string levels ("INFO") and integer levels (logging.INFO)
    if isinstance(log_level, int):
        level = log_level
    else:
        level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_report_config() -> tuple[str, str | None, str]:
    """Return report defaults after loading environment variables.

    Returns:
        Tuple of (output_dir, file_name, title). ``file_name`` is ``None``
        when unset so the default report file name applies.
    """
    from dotenv import find_dotenv, load_dotenv

    # Real environment variables take precedence over values from .env
    load_dotenv(dotenv_path=find_dotenv(usecwd=True) or None, override=False)

    # Treat empty strings as absent
    output_dir = os.getenv(ENV_OUTPUT_DIR) or os.getcwd()
    file_name = os.getenv(ENV_FILE_NAME) or None
    title = os.getenv(ENV_TITLE) or DEFAULT_REPORT_TITLE
    return output_dir, file_name, title


def resolve_report_args(
    explicit_folder: str | None,
    explicit_file_name: str | None,
    explicit_title: str | None,
) -> tuple[str, str | None, str]:
    """Resolve final report settings from explicit args over env/.env."""
    folder, file_name, title = get_report_config()
    if explicit_folder:
        folder = explicit_folder
    if explicit_file_name:
        file_name = explicit_file_name
    if explicit_title:
        title = explicit_title
    return folder, file_name, title


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add logging arguments shared by every command.

    Args:
        parser: ArgumentParser instance to add arguments to
    """
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--log-file", help="Optional log file")
