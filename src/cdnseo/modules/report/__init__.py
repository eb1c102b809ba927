"""Reporting module for cdnseo."""

from .cdn import detect_cdn
from .generator import (
    FORMATS,
    build_report,
    highest_severity,
    render_report,
    summarize_snapshot,
    write_report,
)
from .grouping import group_by_category, group_by_severity, group_findings
from .json_report import render_json, report_to_dict
from .models import Report, ReportConfig, SnapshotSummary
from .text_report import build_renderables, render_text

__all__ = [
    "FORMATS",
    "Report",
    "ReportConfig",
    "SnapshotSummary",
    "build_renderables",
    "build_report",
    "detect_cdn",
    "group_by_category",
    "group_by_severity",
    "group_findings",
    "highest_severity",
    "render_json",
    "render_report",
    "render_text",
    "report_to_dict",
    "summarize_snapshot",
    "write_report",
]
