# File: page_auditor/report/console.py
"""page_auditor.report.console: Текстовая сводка аудита для вывода в терминал."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from page_auditor.aggregator import AuditReport

RULE = "=" * 40


def _heading(title: str) -> List[str]:
    return [RULE, title, RULE]


def status_line(accessible: bool) -> str:
    return "OK" if accessible else "FAIL"


def render_summary(
    report: AuditReport,
    *,
    screenshot_dir: Optional[Union[str, Path]] = None,
    results_path: Optional[Union[str, Path]] = None,
) -> str:
    """Собирает человекочитаемую сводку: итоги, оценки по страницам, вердикт."""
    total = report.pages_tested
    lines: List[str] = _heading("TEST SUMMARY")
    lines += [
        f"Pages Tested: {total}",
        f"Pages Accessible: {report.accessible_count}/{total}",
        f"Average Load Time: {round(report.mean_load_time_ms)}ms",
        f"Total Console Errors: {report.total_errors}",
        f"Average Rating: {report.mean_rating:.1f}/10",
        "",
        "Individual Ratings:",
    ]
    for page in report.pages:
        lines.append(
            f"  [{status_line(page.accessible)}] {page.name}: "
            f"{page.rating}/10 ({page.load_time_ms}ms)"
        )

    if screenshot_dir is not None or results_path is not None:
        lines.append("")
    if screenshot_dir is not None:
        lines.append(f"Screenshots saved to: {screenshot_dir}")
    if results_path is not None:
        lines.append(f"Results saved to: {results_path}")

    lines.append("")
    lines += _heading("OVERALL ASSESSMENT")
    lines.append(f"Status: {report.verdict} - {report.verdict_description}")

    hints = report.recommendations
    if hints:
        lines += ["", "Recommended improvements:"]
        lines += [f"  - {hint}" for hint in hints]

    return "\n".join(lines)
