# page_auditor/report/json_report.py

"""
Генерация JSON-артефакта для проекта PageAuditor.

Сохраняет упорядоченный список PageResult в виде JSON-массива.
"""
import json
from pathlib import Path
from typing import List, Sequence

from page_auditor.models import PageResult


def render_json(results: Sequence[PageResult], output_path: Path | str) -> Path:
    """
    Сохраняет результаты в формате JSON по указанному пути (файл перезаписывается).

    :param results: список PageResult в порядке проверки
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from page_auditor.report.json_report import render_json
    report_path = render_json(results, 'test-results.json')
    print(f"Results saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = [r.to_dict() for r in results]

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output


def load_json(path: Path | str) -> List[PageResult]:
    """Читает ранее сохранённый JSON-артефакт обратно в список PageResult."""
    data = json.loads(Path(path).read_text(encoding='utf-8'))
    if not isinstance(data, list):
        raise TypeError(f"Ожидался JSON-массив, получено {type(data).__name__}")
    return [PageResult.from_dict(item) for item in data]
