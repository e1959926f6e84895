#!/usr/bin/env python3
"""
Convert `npm audit --json` output read from stdin into a static HTML report.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from audit_html.audit.errors import AuditReportError
from audit_html.audit.io import read_audit_input, resolve_output_path, write_report
from audit_html.audit.render import render_report
from audit_html.audit.report import build_report
from audit_html.constants import DEFAULT_OUTPUT_FILE_NAME, SUCCESS_MESSAGE
from audit_html.utils.common import add_common_args, resolve_report_args, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render npm audit JSON (read from stdin) as an HTML report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write audit-report.html into the current directory
  npm audit --json | audit-html

  # Choose folder, file name and title
  npm audit --json | audit-html reports audit.html --title "Frontend audit"
        """,
    )
    add_common_args(parser)
    parser.add_argument(
        "folder",
        nargs="?",
        help="Destination folder (default: current directory)",
    )
    parser.add_argument(
        "file_name",
        nargs="?",
        help=f"Report file name inside the folder (default: {DEFAULT_OUTPUT_FILE_NAME})",
    )
    parser.add_argument("--title", help="Report title")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    folder, file_name, title = resolve_report_args(args.folder, args.file_name, args.title)
    output_path = resolve_output_path(folder, file_name)

    try:
        payload = build_report(read_audit_input(sys.stdin.buffer), title=title)
        write_report(folder, output_path, render_report(payload))
    except AuditReportError as e:
        logger.error("❌ %s", e)
        return 1

    logger.info("Report written to %s", output_path)
    print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
