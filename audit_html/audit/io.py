#!/usr/bin/env python3

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO, TextIO

from audit_html.audit.errors import (
    AuditParseError,
    OutputFolderNotFoundError,
    ReportWriteError,
)
from audit_html.constants import DEFAULT_OUTPUT_FILE_NAME

logger = logging.getLogger(__name__)


def read_audit_input(stream: BinaryIO | TextIO) -> str:
    """Read the complete audit document from ``stream`` (normally stdin's buffer).

    Byte streams are decoded as UTF-8 so that invalid input fails here
    instead of surfacing as surrogates when the report is written.
    """
    data = stream.read()
    if isinstance(data, bytes):
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise AuditParseError(f"Audit input is not valid UTF-8: {e}") from e
    return data


def resolve_output_path(
    folder: str,
    file_name: str | None = None,
    join: Callable[[str, str], str] = os.path.join,
) -> str:
    """Return where the report goes: ``folder`` joined with the file name.

    ``join`` is the path-joining capability; the default follows the host OS.
    """
    return join(folder, file_name or DEFAULT_OUTPUT_FILE_NAME)


def write_report(folder: str, path: str, html: str) -> None:
    """Write ``html`` to ``path`` after checking that ``folder`` exists.

    Raises:
        OutputFolderNotFoundError: ``folder`` is missing
        ReportWriteError: the file could not be written
    """
    if not Path(folder).exists():
        raise OutputFolderNotFoundError(folder)
    # Encode first so nothing is created on disk for unencodable text
    try:
        data = html.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ReportWriteError(path, str(e)) from e
    try:
        Path(path).write_bytes(data)
    except OSError as e:
        raise ReportWriteError(path, str(e)) from e
    logger.debug("Wrote %d characters to %s", len(html), path)
