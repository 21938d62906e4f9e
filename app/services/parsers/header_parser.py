# app/services/parsers/header_parser.py

import re
from datetime import date
from typing import Optional

from .grid import Grid, cell


DATE_RANGE_NOT_SPECIFIED = "Диапазон дат не указан"

SEMESTER_PATTERN = re.compile(r'(\d+)-й\s+семестр\s+(\d{4})\s*-\s*(\d{4})', re.IGNORECASE)
WEEK_RANGE_PATTERN = re.compile(r'с\s+(\d{1,2})\s+по\s+(\d{1,2})\s+([а-яё]+)\s+(\d{4})', re.IGNORECASE)


def _header_text(grid: Grid) -> str:
    return cell(grid, 0, 0)


def _fallback_semester(today: date) -> str:
    # Февраль-июнь - второй семестр, учебный год начинается в августе
    semester = "2-й семестр" if 2 <= today.month <= 6 else "1-й семестр"
    start_year = today.year if today.month >= 8 else today.year - 1
    return f"{semester} {start_year}-{start_year + 1}"


def extract_semester_info(grid: Grid, today: Optional[date] = None) -> str:
    """
    Ищет в заголовке таблицы строку вида "2-й семестр 2024-2025".
    Если не нашли - вычисляет семестр по текущей дате.
    """
    match = SEMESTER_PATTERN.search(_header_text(grid))
    if match:
        return match.group(0).lower()
    return _fallback_semester(today or date.today())


def extract_week_range(grid: Grid) -> str:
    """Ищет в заголовке диапазон недели "с 3 по 9 марта 2025"."""
    text = ' '.join(_header_text(grid).split())
    match = WEEK_RANGE_PATTERN.search(text)
    if not match:
        return DATE_RANGE_NOT_SPECIFIED
    day_from, day_to, month, year = match.groups()
    return f"с {day_from} по {day_to} {month.lower()} {year}"
