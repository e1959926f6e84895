#!/usr/bin/env python3

from __future__ import annotations

import logging
from collections.abc import Sequence

from audit_html.audit.types import ReportSummary, Vulnerability
from audit_html.constants import SEVERITY_LEVELS

logger = logging.getLogger(__name__)


def count_by_severity(vulnerabilities: Sequence[Vulnerability], severity: str) -> int:
    """Number of vulnerabilities whose severity is exactly ``severity``."""
    return sum(1 for vuln in vulnerabilities if vuln.severity == severity)


def summarize(vulnerabilities: Sequence[Vulnerability]) -> ReportSummary:
    """Compute the report totals for a normalized vulnerability list.

    Severities outside ``SEVERITY_LEVELS`` are counted in ``vulns_found`` but
    in no severity bucket.
    """
    counts = {level: count_by_severity(vulnerabilities, level) for level in SEVERITY_LEVELS}

    unknown = len(vulnerabilities) - sum(counts.values())
    if unknown:
        logger.debug("%d vulnerabilities have an unrecognized severity", unknown)

    return ReportSummary(
        vulns_found=len(vulnerabilities),
        vulnerable_dependencies=len({vuln.package for vuln in vulnerabilities}),
        critical_vulns=counts["critical"],
        high_vulns=counts["high"],
        moderate_vulns=counts["moderate"],
        low_vulns=counts["low"],
        info_vulns=counts["info"],
    )
