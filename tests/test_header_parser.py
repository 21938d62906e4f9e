"""Тесты извлечения семестра и диапазона недели из заголовка таблицы."""

from datetime import date

import pytest

from app.services.parsers.header_parser import (
    extract_semester_info, extract_week_range, DATE_RANGE_NOT_SPECIFIED,
)


class TestSemester:
    def test_from_header_lower_cased(self):
        grid = [["РАСПИСАНИЕ 1-Й СЕМЕСТР 2025-2026 учебного года"]]
        assert extract_semester_info(grid) == "1-й семестр 2025-2026"

    def test_from_sample_header(self, sample_grid):
        assert extract_semester_info(sample_grid, date(2030, 1, 1)) == "2-й семестр 2024-2025"

    @pytest.mark.parametrize("today, expected", [
        (date(2025, 3, 10), "2-й семестр 2024-2025"),
        (date(2025, 6, 30), "2-й семестр 2024-2025"),
        (date(2025, 7, 1), "1-й семестр 2024-2025"),
        (date(2025, 9, 1), "1-й семестр 2025-2026"),
        (date(2026, 1, 15), "1-й семестр 2025-2026"),
        (date(2026, 2, 1), "2-й семестр 2025-2026"),
    ])
    def test_fallback_from_date(self, today, expected):
        assert extract_semester_info([["Расписание занятий"]], today) == expected

    def test_empty_grid_uses_fallback(self):
        assert extract_semester_info([], date(2025, 10, 1)) == "1-й семестр 2025-2026"


class TestWeekRange:
    def test_multiline_header(self, sample_grid):
        assert extract_week_range(sample_grid) == "с 3 по 9 марта 2025"

    def test_month_is_lower_cased(self):
        grid = [["Неделя С 28  ПО 31\n\tОКТЯБРЯ 2024 г."]]
        assert extract_week_range(grid) == "с 28 по 31 октября 2024"

    def test_no_match_returns_sentinel(self):
        assert extract_week_range([["Расписание на неделю"]]) == DATE_RANGE_NOT_SPECIFIED
        assert extract_week_range([]) == DATE_RANGE_NOT_SPECIFIED
