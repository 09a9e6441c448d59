# File: tests/conftest.py
from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest

from page_auditor.config import AuditConfig
from page_auditor.logger import init_logging
from page_auditor.models import PageResult

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-screenshot"

GOOD_HTML = """
<html>
  <head><title>Acme Home</title></head>
  <body>
    <nav><a href="/">Home</a></nav>
    <h1>Welcome</h1>
    <img src="/hero.png" alt="hero">
  </body>
</html>
"""


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "browser: end-to-end tests that launch a real Chromium "
        "(set PAGE_AUDITOR_BROWSER_TESTS=1 to run)",
    )


@pytest.fixture(autouse=True)
def fresh_logging():
    """Rebind project log handlers to the current (captured) stdout for every test."""
    init_logging(level="DEBUG")
    yield


# --------------------------------------------------------------------------- #
#                      In-process fakes of the Playwright API                 #
# --------------------------------------------------------------------------- #


class FakeConsoleMessage:
    def __init__(self, type: str, text: str) -> None:
        self.type = type
        self.text = text


class FakeResponse:
    def __init__(self, status: int = 200) -> None:
        self.status = status


class FakePage:
    """Minimal async page: emits console messages during goto, writes a PNG on screenshot."""

    def __init__(
        self,
        *,
        html: str = GOOD_HTML,
        status: Optional[int] = 200,
        console: tuple[tuple[str, str], ...] = (),
        goto_error: Optional[BaseException] = None,
        screenshot_error: Optional[BaseException] = None,
        content_error: Optional[BaseException] = None,
    ) -> None:
        self.html = html
        self.status = status
        self.console = console
        self.goto_error = goto_error
        self.screenshot_error = screenshot_error
        self.content_error = content_error
        self.handlers: Dict[str, List[Callable]] = defaultdict(list)
        self.goto_calls: List[tuple] = []
        self.screenshot_calls: List[tuple] = []

    def on(self, event: str, handler: Callable) -> None:
        self.handlers[event].append(handler)

    def emit(self, event: str, payload) -> None:
        for handler in list(self.handlers[event]):
            handler(payload)

    async def goto(self, url: str, wait_until: Optional[str] = None, timeout: Optional[float] = None):
        self.goto_calls.append((url, wait_until, timeout))
        self.emit("request", object())
        for kind, text in self.console:
            self.emit("console", FakeConsoleMessage(kind, text))
        self.emit("requestfinished", object())
        if self.goto_error is not None:
            raise self.goto_error
        return None if self.status is None else FakeResponse(self.status)

    async def screenshot(self, path: str, full_page: bool = False) -> bytes:
        if self.screenshot_error is not None:
            raise self.screenshot_error
        Path(path).write_bytes(PNG_BYTES)
        self.screenshot_calls.append((path, full_page))
        return PNG_BYTES

    async def content(self) -> str:
        if self.content_error is not None:
            raise self.content_error
        return self.html


class FakeContext:
    def __init__(self, page: FakePage) -> None:
        self.page = page
        self.closed = False

    async def new_page(self) -> FakePage:
        return self.page

    async def close(self) -> None:
        self.closed = True


class FakeBrowser:
    """Hands out the given pages in order, one per new context; then default pages."""

    def __init__(self, *pages: FakePage) -> None:
        self._pages = list(pages)
        self.contexts: List[FakeContext] = []
        self.viewports: List[dict] = []
        self.closed = False

    async def new_context(self, viewport: Optional[dict] = None) -> FakeContext:
        self.viewports.append(viewport)
        page = self._pages.pop(0) if self._pages else FakePage()
        context = FakeContext(page)
        self.contexts.append(context)
        return context

    async def close(self) -> None:
        self.closed = True


class FakeChromium:
    def __init__(self, browser: Optional[FakeBrowser] = None, error: Optional[BaseException] = None):
        self.browser = browser or FakeBrowser()
        self.error = error
        self.launch_kwargs: Optional[dict] = None

    async def launch(self, **kwargs) -> FakeBrowser:
        self.launch_kwargs = kwargs
        if self.error is not None:
            raise self.error
        return self.browser


class FakePlaywright:
    """Stands in for ``async_playwright()``: an async context manager exposing ``chromium``."""

    def __init__(self, chromium: FakeChromium) -> None:
        self.chromium = chromium
        self.exited = False

    async def __aenter__(self) -> FakePlaywright:
        return self

    async def __aexit__(self, *exc_info) -> bool:
        self.exited = True
        return False


# --------------------------------------------------------------------------- #
#                                  Fixtures                                   #
# --------------------------------------------------------------------------- #


@pytest.fixture()
def audit_config(tmp_path) -> AuditConfig:
    """Fast configuration: no pacing, short quiet window, files under tmp_path."""
    return AuditConfig(
        base_url="http://example.com",
        screenshot_dir=tmp_path / "screenshots",
        results_path=tmp_path / "test-results.json",
        pacing_delay=0,
        network_quiet_period=0.01,
        navigation_timeout=5.0,
    )


@pytest.fixture()
def sample_results() -> List[PageResult]:
    return [
        PageResult(
            name="Home",
            url="http://example.com/",
            accessible=True,
            load_time_ms=800,
            screenshot_path="screenshots/home.png",
            rating=10,
        ),
        PageResult(
            name="Company",
            url="http://example.com/company/",
            accessible=True,
            load_time_ms=3400,
            errors=["Uncaught TypeError: x is undefined"],
            warnings=["deprecated API"],
            screenshot_path="screenshots/company.png",
            rating=7,
        ),
        PageResult(
            name="Contact",
            url="http://example.com/contact/",
            accessible=False,
            load_time_ms=0,
            errors=["net::ERR_CONNECTION_REFUSED at http://example.com/contact/"],
            rating=1,
        ),
    ]
