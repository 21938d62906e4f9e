# app/services/parsers/identity_parser.py

import logging
from typing import List

from .grid import Grid, cell, identity_columns, IDENTITY_ROW, FIRST_LESSON_ROW

from app.services.utils.data_validator import is_room_label, is_teacher_name, teacher_candidate


log = logging.getLogger(__name__)


def extract_groups(grid: Grid) -> List[str]:
    """Названия групп из строки заголовков, в порядке колонок."""
    groups = []
    for col in identity_columns(grid):
        name = cell(grid, IDENTITY_ROW, col)
        if not name or is_room_label(name):
            continue
        if name not in groups:
            groups.append(name)
    return groups


def extract_teachers(grid: Grid) -> List[str]:
    """
    Собирает преподавателей из текста уроков. Отдельной колонки с ФИО нет,
    поэтому берем два последних слова ячейки и проверяем формат "Фамилия И.О.".
    """
    teachers = set()
    for row in range(FIRST_LESSON_ROW, len(grid)):
        for col in identity_columns(grid):
            lesson = cell(grid, row, col)
            if not lesson:
                continue
            candidate = teacher_candidate(lesson)
            if is_teacher_name(candidate):
                teachers.add(candidate)

    log.info(f"Найдено преподавателей: {len(teachers)}")
    return sorted(teachers)
