from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from audit_html.audit.aggregator import summarize
from audit_html.audit.errors import AuditParseError
from audit_html.audit.mapper import map_vulnerabilities
from audit_html.audit.schema import extract_raw_advisories
from audit_html.audit.types import ReportPayload, Vulnerability
from audit_html.constants import DEFAULT_REPORT_TITLE, MONTH_NAMES

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def format_report_date(moment: datetime) -> str:
    """Format ``moment`` as ``DD of Month, YYYY - HH:MM:SS`` (24-hour clock)."""
    return (
        f"{moment.day:02d} of {MONTH_NAMES[moment.month - 1]}, {moment.year:04d}"
        f" - {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def parse_audit_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise AuditParseError(f"Audit input is not valid JSON: {e}") from e


def assemble_report(
    vulnerabilities: Sequence[Vulnerability],
    title: str | None = None,
    clock: Clock = datetime.now,
) -> ReportPayload:
    """Bundle vulnerabilities, their summary, a title and a timestamp for rendering.

    Args:
        vulnerabilities: Normalized vulnerabilities in report order
        title: Report heading; ``DEFAULT_REPORT_TITLE`` when empty
        clock: Zero-argument callable returning the generation time

    Returns:
        Immutable payload; identical inputs and clock give an equal payload
    """
    summary = summarize(vulnerabilities)
    return ReportPayload(
        title=title or DEFAULT_REPORT_TITLE,
        current_date=format_report_date(clock()),
        summary=summary,
        vulnerabilities=tuple(vulnerabilities),
    )


def build_report(
    text: str,
    title: str | None = None,
    clock: Clock = datetime.now,
) -> ReportPayload:
    """Run the whole transform from raw audit JSON text to a render payload."""
    document = parse_audit_json(text)
    vulnerabilities = map_vulnerabilities(extract_raw_advisories(document))
    payload = assemble_report(vulnerabilities, title=title, clock=clock)
    logger.info(
        "Found %d vulnerabilities across %d dependencies",
        payload.summary.vulns_found,
        payload.summary.vulnerable_dependencies,
    )
    return payload
