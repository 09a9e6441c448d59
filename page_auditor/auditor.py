# File: page_auditor/auditor.py
"""page_auditor.auditor: Аудит одной страницы в изолированном контексте браузера.

Порядок: контекст с фиксированным viewport → сбор сообщений консоли →
переход с ожиданием «тишины» сети → полноэкранный скриншот → один снимок
DOM → оценка. Любая ошибка на этих шагах записывается в PageResult,
контекст закрывается всегда.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable

from playwright.async_api import Browser, BrowserContext, ConsoleMessage, Page
from playwright.async_api import Error as PlaywrightError

from page_auditor.config import AuditConfig
from page_auditor.errors import AutomationError, NavigationError
from page_auditor.logger import logger
from page_auditor.models import MIN_RATING, PageChecks, PageResult, PageSpec
from page_auditor.network import InflightTracker
from page_auditor.parser.html_parser import parse_html
from page_auditor.rating import compute_rating

__all__ = ["audit_page", "screenshot_path_for"]

_ERROR_PREVIEW = 3


def screenshot_path_for(screenshot_dir: Path, name: str) -> Path:
    """Детерминированный путь скриншота: ``<dir>/<имя в нижнем регистре>.png``."""
    return Path(screenshot_dir) / f"{name.lower()}.png"


def _console_collector(result: PageResult) -> Callable[[ConsoleMessage], None]:
    def _on_console(msg: ConsoleMessage) -> None:
        if msg.type == "error":
            result.errors.append(msg.text)
        elif msg.type == "warning":
            result.warnings.append(msg.text)

    return _on_console


def _error_message(exc: BaseException) -> str:
    if isinstance(exc, PlaywrightError):
        return exc.message
    return str(exc) or exc.__class__.__name__


async def _navigate(
    page: Page, spec: PageSpec, config: AuditConfig, tracker: InflightTracker
) -> int:
    """Переходит на страницу и ждёт «тишины» сети. Возвращает время загрузки в мс."""
    started = time.monotonic()
    try:
        response = await page.goto(
            spec.url, wait_until="load", timeout=config.navigation_timeout * 1000
        )
    except PlaywrightError as exc:
        raise NavigationError(exc.message) from exc

    if response is None:
        raise NavigationError(f"No response received for {spec.url}")
    if response.status >= 400:
        raise NavigationError(f"HTTP {response.status} for {spec.url}")

    remaining = config.navigation_timeout - (time.monotonic() - started)
    await tracker.wait_for_idle(remaining)
    return int(round((time.monotonic() - started) * 1000))


async def _capture(page: Page, path: Path) -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        await page.screenshot(path=str(path), full_page=True)
    except PlaywrightError as exc:
        raise AutomationError(f"Screenshot failed: {exc.message}") from exc
    return str(path)


async def _inspect(page: Page) -> PageChecks:
    try:
        markup = await page.content()
    except PlaywrightError as exc:
        raise AutomationError(f"DOM inspection failed: {exc.message}") from exc
    return parse_html(markup)


def _log_findings(result: PageResult, checks: PageChecks) -> None:
    logger.info("  Title: %s", checks.title)
    logger.info("  Load Time: %dms", result.load_time_ms)
    logger.info("  Has Images: %s", checks.has_images)
    logger.info("  Has Navigation: %s", checks.has_navigation)
    logger.info("  Has Headings: %s", checks.has_headings)
    logger.info("  Console Errors: %d", len(result.errors))
    logger.info("  Console Warnings: %d", len(result.warnings))
    if result.errors:
        logger.info("  Error Details: %s", result.errors[:_ERROR_PREVIEW])


async def audit_page(browser: Browser, spec: PageSpec, config: AuditConfig) -> PageResult:
    """Проверяет одну страницу и возвращает её PageResult.

    Исключения навигации, скриншота и разбора DOM не пробрасываются:
    сообщение добавляется в ``errors``, а ``rating`` становится 1.
    """
    logger.info("Testing: %s", spec.name)
    logger.info("URL: %s", spec.url)

    result = PageResult.for_spec(spec)
    context: BrowserContext | None = None
    try:
        context = await browser.new_context(
            viewport={"width": config.viewport_width, "height": config.viewport_height}
        )
        page = await context.new_page()
        page.on("console", _console_collector(result))
        tracker = InflightTracker(config.max_inflight_requests, config.network_quiet_period)
        tracker.attach(page)

        result.load_time_ms = await _navigate(page, spec, config, tracker)
        result.accessible = True

        result.screenshot_path = await _capture(
            page, screenshot_path_for(config.screenshot_dir, spec.name)
        )
        checks = await _inspect(page)
        _log_findings(result, checks)

        result.rating = compute_rating(
            result.load_time_ms,
            len(result.errors),
            checks.has_images,
            checks.has_navigation,
            checks.has_headings,
        )
        logger.info("  RATING: %d/10", result.rating)
        logger.info("  Screenshot: %s", result.screenshot_path)
    except Exception as exc:
        message = _error_message(exc)
        logger.error("  ERROR: %s", message)
        result.errors.append(message)
        result.rating = MIN_RATING
    finally:
        if context is not None:
            await _close_context(context, spec)

    return result


async def _close_context(context: BrowserContext, spec: PageSpec) -> None:
    try:
        await context.close()
    except PlaywrightError as exc:
        logger.warning("Failed to close browser context for %s: %s", spec.name, exc.message)
