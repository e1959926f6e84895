#!/usr/bin/env python3
"""
Schema detection and advisory extraction for `npm audit --json` output.

Two incompatible layouts exist in the wild:

1. Legacy (npm <= 6): a flat ``advisories`` map of advisory id -> advisory
2. Modern (npm >= 7): a ``vulnerabilities`` map of package -> entry whose
   ``via`` list mixes advisory objects and plain package-name strings

The layout is decided once, up front, and each variant has its own extractor.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from audit_html.audit.types import RawAdvisory

logger = logging.getLogger(__name__)


class AuditSchema(Enum):
    MODERN = "vulnerabilities"
    LEGACY = "advisories"
    EMPTY = "empty"


def detect_schema(document: Any) -> AuditSchema:
    """Return which audit layout ``document`` follows.

    ``vulnerabilities`` wins when both keys are present. Anything that is not
    a JSON object, or has neither key, is an empty report rather than an error.
    """
    if not isinstance(document, Mapping):
        return AuditSchema.EMPTY
    if isinstance(document.get("vulnerabilities"), Mapping):
        return AuditSchema.MODERN
    if isinstance(document.get("advisories"), Mapping):
        return AuditSchema.LEGACY
    return AuditSchema.EMPTY


def _extract_modern(document: Mapping[str, Any]) -> list[RawAdvisory | str]:
    entries: list[RawAdvisory | str] = []
    for package, info in document["vulnerabilities"].items():
        via = info.get("via") if isinstance(info, Mapping) else None
        if not isinstance(via, list):
            logger.debug("Package %s has no 'via' list; skipping", package)
            continue
        # Plain strings are kept here; the mapper drops them
        entries.extend(via)
    return entries


def _extract_legacy(document: Mapping[str, Any]) -> list[RawAdvisory]:
    return list(document["advisories"].values())


def _extract_empty(document: Any) -> list[Any]:
    return []


_EXTRACTORS: dict[AuditSchema, Callable[[Any], list[Any]]] = {
    AuditSchema.MODERN: _extract_modern,
    AuditSchema.LEGACY: _extract_legacy,
    AuditSchema.EMPTY: _extract_empty,
}


def extract_raw_advisories(document: Any) -> list[Any]:
    """Flatten either audit layout into an ordered list of raw advisory entries."""
    schema = detect_schema(document)
    entries = _EXTRACTORS[schema](document)
    logger.debug("Detected %s audit schema with %d raw entries", schema.name, len(entries))
    return entries
