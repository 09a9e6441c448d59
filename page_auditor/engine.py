# File: page_auditor/engine.py
"""page_auditor.engine: Orchestration layer: один браузер на запуск, страницы по очереди."""

from __future__ import annotations

import asyncio
from typing import List, Sequence

from playwright.async_api import Browser, async_playwright

from page_auditor.auditor import audit_page
from page_auditor.config import AuditConfig
from page_auditor.logger import logger
from page_auditor.models import PageResult, PageSpec

__all__ = ["audit_pages", "start_audit"]


async def audit_pages(
    browser: Browser, specs: Sequence[PageSpec], config: AuditConfig
) -> List[PageResult]:
    """Проверяет страницы строго последовательно, с паузой после каждой.

    Возвращает ровно один PageResult на каждую PageSpec в исходном порядке.
    """
    results: List[PageResult] = []
    for index, spec in enumerate(specs, start=1):
        logger.info("[%d/%d] %s", index, len(specs), spec.name)
        results.append(await audit_page(browser, spec, config))
        if config.pacing_delay:
            await asyncio.sleep(config.pacing_delay)
    return results


async def start_audit(config: AuditConfig) -> List[PageResult]:
    """Запускает Chromium, проверяет все страницы из конфигурации и закрывает браузер.

    Ошибка запуска браузера не перехватывается: это отказ всего запуска.
    """
    specs = config.page_specs()
    logger.info("Testing %d pages...", len(specs))
    logger.info("Base URL: %s", str(config.base_url).rstrip("/"))
    config.screenshot_dir.mkdir(parents=True, exist_ok=True)

    async with async_playwright() as playwright:
        try:
            browser = await playwright.chromium.launch(
                headless=config.headless, args=list(config.browser_args)
            )
        except Exception as exc:
            logger.error("Browser launch failed: %s", exc)
            raise
        try:
            return await audit_pages(browser, specs, config)
        finally:
            await browser.close()
            logger.debug("Browser closed")
