# === FILE: page_auditor/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска PageAuditor через командную строку.

Команды:
  audit     Проверить страницы сайта, сохранить скриншоты и результаты
  report    Показать сводку по ранее сохранённому test-results.json
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --base-url URL      Корневой URL сайта (override base_url и SITE_URL)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда audit опции:
  --json PATH         Куда сохранить JSON с результатами (override results_path)
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблоном report.html.j2
  --screenshots DIR   Папка для скриншотов (override screenshot_dir)
  --pacing SEC        Пауза после каждой страницы (override pacing_delay)
  --strict/--no-strict
                      Код выхода 1, если есть недоступные страницы

Дополнительно:
  --version, -v       Показать версию PageAuditor

Пример:
  SITE_URL=https://staging.example.com page-auditor audit --html report.html
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from page_auditor import __version__
from page_auditor.aggregator import aggregate_results
from page_auditor.config import load_config
from page_auditor.engine import start_audit
from page_auditor.logger import init_logging, logger
from page_auditor.report.console import render_summary
from page_auditor.report.html_report import render_html
from page_auditor.report.json_report import load_json, render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])

def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)

@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PageAuditor, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--base-url', '-u', 'base_url',
    default=None,
    help='Корневой URL сайта (override base_url)'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, base_url, log_level, log_file, log_format):
    """Группа команд PageAuditor CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path).with_overrides(base_url=base_url)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg

@cli.command('audit', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON с результатами в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном (по умолчанию шаблон из пакета)'
)
@click.option(
    '--screenshots', '-s', 'screenshot_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Папка для скриншотов'
)
@click.option(
    '--pacing', 'pacing_delay',
    type=float,
    default=None,
    help='Пауза после каждой страницы (секунд)'
)
@click.option(
    '--strict/--no-strict', 'strict',
    default=None,
    help='Код выхода 1, если хотя бы одна страница недоступна'
)
@click.pass_context
def audit(ctx, json_output, html_output, template_dir, screenshot_dir, pacing_delay, strict):
    """Проверить страницы и сгенерировать отчёты."""
    try:
        cfg = ctx.obj['config'].with_overrides(
            results_path=json_output,
            screenshot_dir=screenshot_dir,
            pacing_delay=pacing_delay,
            fail_on_inaccessible=strict,
        )
    except ValidationError as e:
        print_error(f'Неверные параметры: {e}')

    click.echo(f'Testing {len(cfg.pages)} pages at {str(cfg.base_url).rstrip("/")}')
    try:
        results = asyncio.run(start_audit(cfg))
    except Exception as e:
        logger.error("Audit aborted: %s", e)
        print_error(f'Ошибка при аудите: {e}')

    report = aggregate_results(results)

    try:
        saved_json = render_json(results, cfg.results_path)
    except OSError as e:
        print_error(f'Ошибка при сохранении JSON: {e}')

    click.echo(render_summary(report, screenshot_dir=cfg.screenshot_dir, results_path=saved_json))

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')

    if cfg.fail_on_inaccessible and not report.all_accessible:
        ctx.exit(1)

@cli.command('report', context_settings=CONTEXT_SETTINGS)
@click.argument(
    'results_file',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном (по умолчанию шаблон из пакета)'
)
def show_report(results_file, html_output, template_dir):
    """Показать сводку по сохранённому JSON с результатами."""
    try:
        results = load_json(results_file)
    except (OSError, ValueError, TypeError, KeyError) as e:
        print_error(f'Не удалось прочитать {results_file}: {e}')

    report = aggregate_results(results)
    click.echo(render_summary(report, results_path=results_file))

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')

@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))

if __name__ == "__main__":
    cli()
