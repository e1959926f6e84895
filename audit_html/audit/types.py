"""
Typed structures for audit report data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypedDict


class RawAdvisory(TypedDict, total=False):
    """Advisory object as emitted by `npm audit --json`.

    Legacy reports key these by advisory id under ``advisories``; newer
    reports nest them inside the ``via`` list of each vulnerable package.
    Every field is optional and nothing is validated on the way in.
    """

    title: str
    url: str
    name: str
    module_name: str
    severity: str
    cwe: list[str] | str
    cves: list[str] | str


@dataclass(frozen=True)
class Vulnerability:
    """One normalized advisory row of the report."""

    name: str
    link: str | None
    package: str
    severity: str | None
    cwes: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "link": self.link,
            "package": self.package,
            "severity": self.severity,
            "cwes": self.cwes,
        }


@dataclass(frozen=True)
class ReportSummary:
    vulns_found: int = 0
    vulnerable_dependencies: int = 0
    critical_vulns: int = 0
    high_vulns: int = 0
    moderate_vulns: int = 0
    low_vulns: int = 0
    info_vulns: int = 0

    @property
    def severity_total(self) -> int:
        """Sum of the five severity counters (may be below ``vulns_found``)."""
        return (
            self.critical_vulns
            + self.high_vulns
            + self.moderate_vulns
            + self.low_vulns
            + self.info_vulns
        )


@dataclass(frozen=True)
class ReportPayload:
    """Everything the HTML template needs, assembled in one place."""

    title: str
    current_date: str
    summary: ReportSummary
    vulnerabilities: tuple[Vulnerability, ...] = field(default_factory=tuple)

    def to_template_context(self) -> dict[str, Any]:
        s = self.summary
        return {
            "title": self.title,
            "current_date": self.current_date,
            "vulns_found": s.vulns_found,
            "vulnerable_dependencies": s.vulnerable_dependencies,
            "critical_vulns": s.critical_vulns,
            "high_vulns": s.high_vulns,
            "moderate_vulns": s.moderate_vulns,
            "low_vulns": s.low_vulns,
            "info_vulns": s.info_vulns,
            "vulnerabilities": [v.to_dict() for v in self.vulnerabilities],
        }
