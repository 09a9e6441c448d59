# File: page_auditor/report/__init__.py
"""page_auditor.report: Вывод результатов аудита (JSON, HTML и текст для терминала)."""

from __future__ import annotations

from page_auditor.report.console import render_summary
from page_auditor.report.html_report import render_html
from page_auditor.report.json_report import load_json, render_json

__all__ = ["render_json", "load_json", "render_html", "render_summary"]
