# === FILE: page_auditor/config.py ===
"""
Модуль для загрузки и валидации конфигурации PageAuditor.
Используется Pydantic для описания схемы и проверки данных.

Все параметры имеют значения по умолчанию: без файла конфигурации
проверяются шесть страниц сайта по адресу из переменной окружения
``SITE_URL`` (или ``http://localhost:8090``).
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    field_validator,
    model_validator,
)

from page_auditor.models import PageSpec

SITE_URL_ENV = "SITE_URL"
DEFAULT_BASE_URL = "http://localhost:8090"


def _base_url_from_env() -> str:
    return os.environ.get(SITE_URL_ENV) or DEFAULT_BASE_URL


class PageEntry(BaseModel):
    """Страница для проверки: имя и путь относительно base_url."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Отображаемое имя страницы.")
    path: str = Field("/", description="Путь страницы относительно base_url.")

    @field_validator("path")
    def _leading_slash(cls, v: str) -> str:
        return v if v.startswith("/") else f"/{v}"


DEFAULT_PAGES: tuple[PageEntry, ...] = (
    PageEntry(name="Home", path="/"),
    PageEntry(name="Company", path="/company/"),
    PageEntry(name="Platform", path="/platform/"),
    PageEntry(name="Industries", path="/industries/"),
    PageEntry(name="Careers", path="/careers/"),
    PageEntry(name="Contact", path="/contact/"),
)


class AuditConfig(BaseModel):
    """Конфигурация одного запуска аудита."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: HttpUrl = Field(
        default_factory=_base_url_from_env, validate_default=True, description="Корневой URL сайта."
    )
    pages: List[PageEntry] = Field(
        default_factory=lambda: list(DEFAULT_PAGES), description="Упорядоченный список страниц."
    )
    viewport_width: int = Field(1920, gt=0, description="Ширина окна браузера (px).")
    viewport_height: int = Field(1080, gt=0, description="Высота окна браузера (px).")
    navigation_timeout: float = Field(30.0, gt=0, description="Таймаут загрузки страницы (секунд).")
    max_inflight_requests: int = Field(
        2, ge=0, description="Сколько запросов может оставаться в полёте при 'тишине' сети."
    )
    network_quiet_period: float = Field(0.5, ge=0, description="Длительность 'тишины' сети (секунд).")
    pacing_delay: float = Field(1.0, ge=0, description="Пауза после каждой страницы (секунд).")
    screenshot_dir: Path = Field(Path("screenshots"), description="Папка для скриншотов.")
    results_path: Path = Field(Path("test-results.json"), description="Файл JSON с результатами.")
    headless: bool = Field(True, description="Запускать браузер без окна.")
    browser_args: List[str] = Field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"],
        description="Аргументы запуска Chromium.",
    )
    fail_on_inaccessible: bool = Field(
        True, description="Ненулевой код выхода, если хотя бы одна страница недоступна."
    )

    @field_validator("base_url", mode="before")
    def _strip_trailing_slash(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    @model_validator(mode="after")
    def _check_pages(self) -> AuditConfig:
        if not self.pages:
            raise ValueError("Список страниц пуст")
        names = [p.name for p in self.pages]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Повторяющиеся имена страниц: {', '.join(duplicates)}")
        return self

    def with_overrides(self, **changes: Any) -> AuditConfig:
        """Возвращает новую проверенную конфигурацию; значения None игнорируются."""
        changes = {k: v for k, v in changes.items() if v is not None}
        if not changes:
            return self
        return AuditConfig(**{**self.model_dump(), **changes})

    def page_url(self, entry: PageEntry) -> str:
        return str(self.base_url).rstrip("/") + entry.path

    def page_specs(self) -> List[PageSpec]:
        """Возвращает PageSpec в порядке, заданном в конфигурации."""
        return [PageSpec(name=p.name, url=self.page_url(p)) for p in self.pages]


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> AuditConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект AuditConfig.

    Без пути используется ``configs/default.yaml``, если он есть в текущей
    папке, иначе встроенные значения по умолчанию. Явно указанный, но
    отсутствующий файл приводит к FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return AuditConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return AuditConfig(**data)


__all__ = ["AuditConfig", "PageEntry", "DEFAULT_PAGES", "load_config"]
