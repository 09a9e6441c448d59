"""page_auditor.parser: разбор отрендеренной разметки страницы."""

from page_auditor.parser.html_parser import parse_html

__all__ = ["parse_html"]
