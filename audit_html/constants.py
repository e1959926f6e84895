#!/usr/bin/env python3
"""
Centralized constants for the audit-html project.

This module contains the fixed strings and defaults used throughout the
codebase so that the CLI, the report assembler and the template agree.
"""

# Severity levels emitted by `npm audit`, most severe first.
# The aggregator keeps one counter per entry; changing this set changes the report.
SEVERITY_LEVELS = ("critical", "high", "moderate", "low", "info")

# Output Defaults
DEFAULT_OUTPUT_FILE_NAME = "audit-report.html"
DEFAULT_REPORT_TITLE = "NPM Audit Report"
REPORT_TEMPLATE_NAME = "audit_report.html"

# Joined between CWE and CVE identifiers in a single table cell
CWE_SEPARATOR = ", "

# Report timestamp, e.g. "07 of March, 2024 - 09:05:03"
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# Environment Variables
ENV_OUTPUT_DIR = "AUDIT_HTML_OUTPUT_DIR"
ENV_FILE_NAME = "AUDIT_HTML_FILE_NAME"
ENV_TITLE = "AUDIT_HTML_TITLE"

# Status Messages
SUCCESS_MESSAGE = "Audit exported successfully!"
