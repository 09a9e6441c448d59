# page_auditor/models.py
"""
Data models for the PageAuditor run: what to audit and what was found.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

MIN_RATING = 1
MAX_RATING = 10


@dataclass(frozen=True, slots=True)
class PageSpec:
    """A single page to audit: display name and absolute URL."""

    name: str
    url: str


@dataclass(slots=True)
class PageResult:
    """Audit record of one page, serialized with camelCase keys."""

    name: str
    url: str
    accessible: bool = False
    load_time_ms: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    screenshot_path: Optional[str] = None
    rating: int = MIN_RATING

    @classmethod
    def for_spec(cls, spec: PageSpec) -> PageResult:
        return cls(name=spec.name, url=spec.url)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "url": self.url,
            "accessible": self.accessible,
            "loadTimeMs": self.load_time_ms,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "screenshotPath": self.screenshot_path,
            "rating": self.rating,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PageResult:
        return cls(
            name=data["name"],
            url=data["url"],
            accessible=bool(data.get("accessible", False)),
            load_time_ms=int(data.get("loadTimeMs", 0)),
            errors=list(data.get("errors", [])),
            warnings=list(data.get("warnings", [])),
            screenshot_path=data.get("screenshotPath"),
            rating=int(data.get("rating", MIN_RATING)),
        )


@dataclass(slots=True)
class PageChecks:
    """Content landmarks found in a rendered page."""

    title: str = ""
    has_images: bool = False
    has_navigation: bool = False
    has_headings: bool = False
