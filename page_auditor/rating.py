# File: page_auditor/rating.py
"""page_auditor.rating: Эвристическая оценка качества страницы по шкале 1–10."""

from __future__ import annotations

from typing import Final

from page_auditor.models import MAX_RATING, MIN_RATING

SLOW_LOAD_MS: Final[int] = 3000
SLOW_LOAD_PENALTY: Final[int] = 2
MISSING_LANDMARK_PENALTY: Final[int] = 2

__all__ = ["SLOW_LOAD_MS", "compute_rating", "clamp_rating"]


def clamp_rating(value: int) -> int:
    """Ограничивает оценку диапазоном [1, 10]."""
    return max(MIN_RATING, min(MAX_RATING, value))


def compute_rating(
    load_time_ms: int,
    error_count: int,
    has_images: bool,
    has_navigation: bool,
    has_headings: bool,
) -> int:
    """Считает оценку: 10 минус штрафы за медленную загрузку, ошибки консоли
    и отсутствие изображений, навигации или заголовков."""
    rating = MAX_RATING
    if load_time_ms > SLOW_LOAD_MS:
        rating -= SLOW_LOAD_PENALTY
    rating -= error_count
    if not has_images:
        rating -= MISSING_LANDMARK_PENALTY
    if not has_navigation:
        rating -= MISSING_LANDMARK_PENALTY
    if not has_headings:
        rating -= MISSING_LANDMARK_PENALTY
    return clamp_rating(rating)
