# app/services/parsers/grid.py

import math
from typing import Any, Iterable, List

import pandas as pd


Grid = List[List[str]]

# Строка с названиями групп и первая строка с уроками
IDENTITY_ROW = 2
FIRST_LESSON_ROW = 3
# Первая колонка группы; следующая за ней колонка - кабинет
FIRST_IDENTITY_COL = 2
IDENTITY_STRIDE = 2


def _to_text(value: Any) -> str:
    """Приводит значение ячейки к обрезанной строке. None и NaN -> ''."""
    if value is None:
        return ''
    if isinstance(value, float):
        if math.isnan(value):
            return ''
        # pandas читает числовые ячейки как float: 12.0 -> '12'
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def cell(grid: List[List[Any]], row: int, col: int) -> str:
    """
    Тотальный доступ к ячейке: для любых индексов вне таблицы и для пустых
    значений возвращает пустую строку.
    """
    if row < 0 or col < 0 or row >= len(grid):
        return ''
    cells = grid[row]
    if cells is None or col >= len(cells):
        return ''
    return _to_text(cells[col])


def normalize_grid(raw: Iterable[Iterable[Any]]) -> Grid:
    """Превращает любые "сырые" строки таблицы в Grid из обрезанных строк. Длина строк сохраняется."""
    grid = []
    for row in raw or []:
        grid.append([_to_text(value) for value in (row or [])])
    return grid


def grid_from_dataframe(df: pd.DataFrame) -> Grid:
    """Конвертирует DataFrame, прочитанный с header=None, в позиционную таблицу."""
    return normalize_grid(df.astype(object).where(pd.notna(df), None).values.tolist())


def grid_width(grid: Grid) -> int:
    return max((len(row) if row else 0 for row in grid), default=0)


def identity_columns(grid: Grid) -> range:
    """Колонки с уроками групп: 2, 4, 6, ..."""
    return range(FIRST_IDENTITY_COL, grid_width(grid), IDENTITY_STRIDE)
