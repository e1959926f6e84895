#!/usr/bin/env python3

from __future__ import annotations

import logging

import pytest

from audit_html.audit.mapper import join_identifiers, map_vulnerabilities, to_vulnerability
from audit_html.audit.types import Vulnerability


def test_to_vulnerability_maps_all_fields() -> None:
    raw = {
        "title": "Foo",
        "name": "bar",
        "severity": "high",
        "url": "https://example.test/advisory",
        "cwe": ["CWE-1"],
        "cves": ["CVE-2020-1"],
    }
    assert to_vulnerability(raw) == Vulnerability(
        name="Foo",
        link="https://example.test/advisory",
        package="bar",
        severity="high",
        cwes="CWE-1, CVE-2020-1",
    )


@pytest.mark.parametrize(
    "raw",
    [
        "lodash",
        42,
        None,
        ["title"],
        {"name": "bar", "severity": "high"},
        {"title": "", "name": "bar"},
        {"title": None, "name": "bar"},
    ],
)
def test_non_advisories_map_to_none(raw) -> None:
    assert to_vulnerability(raw) is None


def test_name_preferred_over_module_name() -> None:
    vuln = to_vulnerability({"title": "T", "name": "new", "module_name": "old"})
    assert vuln is not None and vuln.package == "new"


def test_module_name_used_when_name_missing_or_empty() -> None:
    a = to_vulnerability({"title": "T", "module_name": "old"})
    b = to_vulnerability({"title": "T", "name": "", "module_name": "old"})
    assert a is not None and a.package == "old"
    assert b is not None and b.package == "old"


def test_missing_package_becomes_empty_and_warns(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        vuln = to_vulnerability({"title": "Orphan", "severity": "low"})
    assert vuln is not None and vuln.package == ""
    assert "Orphan" in caplog.text


def test_link_and_severity_pass_through_unchanged() -> None:
    vuln = to_vulnerability({"title": "T", "name": "p", "severity": "SEVERE"})
    assert vuln is not None
    assert vuln.link is None
    assert vuln.severity == "SEVERE"


@pytest.mark.parametrize(
    "cwe,cves,expected",
    [
        (None, None, ""),
        ([], [], ""),
        (["CWE-1", "CWE-2"], None, "CWE-1, CWE-2"),
        (None, ["CVE-1"], "CVE-1"),
        (["CWE-1"], ["CVE-1", "CVE-2"], "CWE-1, CVE-1, CVE-2"),
        ("CWE-79", ["CVE-2"], "CWE-79, CVE-2"),
        (79, None, "79"),
        (["CWE-1"], 2020, "CWE-1, 2020"),
    ],
)
def test_join_identifiers_puts_cwes_before_cves(cwe, cves, expected) -> None:
    assert join_identifiers(cwe, cves) == expected


def test_map_vulnerabilities_filters_and_keeps_order() -> None:
    raw = [
        {"title": "B", "name": "b"},
        "pkg",
        {"name": "no-title"},
        {"title": "A", "name": "a"},
        {"title": "B", "name": "b"},
    ]
    vulns = map_vulnerabilities(raw)
    assert [v.name for v in vulns] == ["B", "A", "B"]
    # Duplicates are kept
    assert vulns[0] == vulns[2]


def test_scalar_identifier_fields_do_not_raise() -> None:
    vuln = to_vulnerability({"title": "T", "name": "p", "cwe": 79, "cves": None})
    assert vuln is not None and vuln.cwes == "79"
