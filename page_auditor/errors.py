# File: page_auditor/errors.py
"""page_auditor.errors: Исключения уровня одной страницы.

Все они перехватываются в audit_page и превращаются в запись PageResult
(accessible/rating/errors), а не прерывают запуск.
"""

from __future__ import annotations

__all__ = ["AuditError", "NavigationError", "AutomationError"]


class AuditError(Exception):
    """Базовая ошибка аудита страницы."""


class NavigationError(AuditError):
    """Страница не загрузилась: таймаут, ошибка соединения или плохой HTTP-статус."""


class AutomationError(AuditError):
    """Страница загрузилась, но скриншот или проверка DOM не удались."""
