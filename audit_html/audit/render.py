#!/usr/bin/env python3
"""
HTML rendering of an assembled audit report.

The template lives in ``audit_html/templates`` and receives the flat context
produced by ``ReportPayload.to_template_context``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from audit_html.audit.types import ReportPayload
from audit_html.constants import REPORT_TEMPLATE_NAME, SEVERITY_LEVELS

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals["severity_levels"] = SEVERITY_LEVELS
    return env


def render_report(payload: ReportPayload) -> str:
    template = get_environment().get_template(REPORT_TEMPLATE_NAME)
    return template.render(**payload.to_template_context())
