#!/usr/bin/env python3

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from audit_html.audit.types import RawAdvisory, Vulnerability
from audit_html.constants import CWE_SEPARATOR

logger = logging.getLogger(__name__)


def _as_id_list(value: Any) -> list[str]:
    """Normalize a ``cwe``/``cves`` field to a list of identifier strings.

    Older npm releases emit a bare string for ``cwe``; absent fields are empty
    and any other scalar becomes a one-element list.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if not isinstance(value, (list, tuple)):
        return [str(value)]
    return [str(item) for item in value if item is not None]


def join_identifiers(cwe: Any, cves: Any) -> str:
    """Return CWE ids followed by CVE ids, joined with ``", "``."""
    return CWE_SEPARATOR.join(_as_id_list(cwe) + _as_id_list(cves))


def to_vulnerability(raw: RawAdvisory | str | Any) -> Vulnerability | None:
    """Map one raw ``via``/``advisories`` entry to a ``Vulnerability``.

    Returns ``None`` for entries that are not standalone advisories: plain
    strings from a ``via`` list and objects without a non-empty ``title``.
    """
    if not isinstance(raw, Mapping):
        return None
    title = raw.get("title")
    if not title:
        return None

    package = raw.get("name") or raw.get("module_name")
    if not package:
        logger.warning("Advisory '%s' has neither 'name' nor 'module_name'", title)
        package = ""

    return Vulnerability(
        name=str(title),
        link=raw.get("url"),
        package=str(package),
        severity=raw.get("severity"),
        cwes=join_identifiers(raw.get("cwe"), raw.get("cves")),
    )


def map_vulnerabilities(raw_entries: Iterable[Any]) -> list[Vulnerability]:
    """Map raw entries in order, dropping the ones that are not advisories."""
    mapped = (to_vulnerability(raw) for raw in raw_entries)
    return [vuln for vuln in mapped if vuln is not None]
