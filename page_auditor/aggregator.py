# File: page_auditor/aggregator.py
"""page_auditor.aggregator: Модуль агрегатора результатов аудита."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from page_auditor.models import PageResult
from page_auditor.rating import SLOW_LOAD_MS

RECOMMEND_BELOW = 8.0

# (порог средней оценки, статус, описание) по убыванию порога
VERDICT_BANDS: tuple[tuple[float, str, str], ...] = (
    (9.0, "EXCELLENT", "Professional quality website"),
    (7.0, "GOOD", "Minor improvements needed"),
    (5.0, "FAIR", "Significant improvements needed"),
)
POOR = ("POOR", "Major redesign required")


def verdict_for(mean_rating: float) -> tuple[str, str]:
    """Возвращает (статус, описание) для средней оценки."""
    for threshold, status, description in VERDICT_BANDS:
        if mean_rating >= threshold:
            return status, description
    return POOR


@dataclass(slots=True)
class AuditReport:
    """Сводка по всем проверенным страницам."""

    pages: List[PageResult] = field(default_factory=list)
    accessible_count: int = 0
    mean_load_time_ms: float = 0.0
    total_errors: int = 0
    mean_rating: float = 0.0

    @property
    def pages_tested(self) -> int:
        return len(self.pages)

    @property
    def all_accessible(self) -> bool:
        return self.accessible_count == self.pages_tested

    @property
    def verdict(self) -> str:
        return verdict_for(self.mean_rating)[0]

    @property
    def verdict_description(self) -> str:
        return verdict_for(self.mean_rating)[1]

    @property
    def recommendations(self) -> List[str]:
        """Подсказки по исправлению; выдаются только при средней оценке ниже 8."""
        if self.mean_rating >= RECOMMEND_BELOW:
            return []
        hints: List[str] = []
        if self.mean_load_time_ms > SLOW_LOAD_MS:
            hints.append("Optimize load time (currently >3s)")
        if self.total_errors > 0:
            hints.append("Fix console errors")
        if not self.all_accessible:
            hints.append("Fix inaccessible pages")
        return hints

    def summary(self) -> Dict[str, Any]:
        return {
            "pagesTested": self.pages_tested,
            "pagesAccessible": self.accessible_count,
            "averageLoadTimeMs": round(self.mean_load_time_ms),
            "totalConsoleErrors": self.total_errors,
            "averageRating": round(self.mean_rating, 1),
            "status": self.verdict,
            "recommendations": self.recommendations,
        }


def aggregate_results(results: Sequence[PageResult]) -> AuditReport:
    """Собирает сводку: средние считаются по всем N страницам, включая недоступные."""
    pages = list(results)
    report = AuditReport(pages=pages)
    if not pages:
        return report
    total = len(pages)
    report.accessible_count = sum(1 for p in pages if p.accessible)
    report.mean_load_time_ms = sum(p.load_time_ms for p in pages) / total
    report.mean_rating = sum(p.rating for p in pages) / total
    report.total_errors = sum(len(p.errors) for p in pages)
    return report


__all__ = ["AuditReport", "VERDICT_BANDS", "aggregate_results", "verdict_for"]
