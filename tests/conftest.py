"""Shared fixtures for audit-html tests."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

import pytest

FIXED_MOMENT = datetime(2024, 3, 7, 9, 5, 3)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_MOMENT


@pytest.fixture
def legacy_document() -> dict[str, Any]:
    return {
        "advisories": {
            "1179": {
                "title": "Prototype Pollution",
                "module_name": "minimist",
                "severity": "low",
                "url": "https://npmjs.com/advisories/1179",
                "cwe": "CWE-471",
                "cves": [],
            },
            "1523": {
                "title": "Prototype Pollution in lodash",
                "module_name": "lodash",
                "severity": "high",
                "url": "https://npmjs.com/advisories/1523",
                "cwe": "CWE-400",
                "cves": ["CVE-2019-10744"],
            },
        }
    }


@pytest.fixture
def modern_document() -> dict[str, Any]:
    return {
        "auditReportVersion": 2,
        "vulnerabilities": {
            "minimist": {
                "name": "minimist",
                "severity": "critical",
                "via": [
                    {
                        "source": 1086549,
                        "name": "minimist",
                        "title": "Prototype Pollution in minimist",
                        "url": "https://github.com/advisories/GHSA-xvch-5gv4-984h",
                        "severity": "critical",
                        "cwe": ["CWE-1321"],
                    }
                ],
            },
            "mkdirp": {"name": "mkdirp", "severity": "critical", "via": ["minimist"]},
            "lodash": {
                "name": "lodash",
                "severity": "high",
                "via": [
                    {
                        "name": "lodash",
                        "title": "Command Injection in lodash",
                        "url": "https://github.com/advisories/GHSA-35jh-r3h4-6jhm",
                        "severity": "high",
                        "cwe": ["CWE-77", "CWE-94"],
                    },
                    {
                        "name": "lodash",
                        "title": "ReDoS in lodash",
                        "url": "https://github.com/advisories/GHSA-29mw-wpgm-hmr9",
                        "severity": "moderate",
                        "cwe": ["CWE-400"],
                    },
                ],
            },
        },
        "metadata": {"vulnerabilities": {"critical": 2, "high": 1}},
    }


@pytest.fixture
def modern_text(modern_document) -> str:
    return json.dumps(modern_document)
