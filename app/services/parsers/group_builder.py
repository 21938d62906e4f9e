# app/services/parsers/group_builder.py

import logging
from typing import List, Optional

from .common_structs import DaySchedule, HalfSlot
from .grid import Grid, cell, identity_columns, IDENTITY_ROW
from .period_reducer import split_days, reduce_periods

from app.services.exceptions import GroupNotFound
from app.services.utils.data_validator import is_room_label, contains_class_hour


log = logging.getLogger(__name__)


def format_lesson(lesson: str, room: str) -> str:
    return f"{lesson} (Каб. {room})" if room else lesson


def _format_slot(slot: HalfSlot) -> str:
    return format_lesson(slot.lesson, slot.room)


def _render_pair(first: HalfSlot, second: HalfSlot) -> Optional[str]:
    """Одна пара из двух половинок: совпадающие - один раз, разные - через ' / '."""
    parts = [_format_slot(slot) for slot in (first, second) if slot.lesson]
    if not parts:
        return None
    if len(parts) == 2 and parts[0] == parts[1]:
        return parts[0]
    return ' / '.join(parts)


def find_group_column(grid: Grid, group: str) -> int:
    """Индекс колонки уроков группы. Сравнение без учета регистра."""
    target = str(group or '').strip().lower()
    if target:
        for col in identity_columns(grid):
            name = cell(grid, IDENTITY_ROW, col)
            if name and not is_room_label(name) and name.lower() == target:
                return col
    raise GroupNotFound(group)


def build_group_schedule(grid: Grid, group: str) -> List[DaySchedule]:
    """
    Строит расписание группы по дням.
    Бросает GroupNotFound, если группы нет в строке заголовков.
    """
    try:
        lesson_col = find_group_column(grid, group)
    except GroupNotFound:
        log.warning(f"Группа '{group}' не найдена в таблице.")
        raise

    def read_slot(row: int) -> HalfSlot:
        return HalfSlot(lesson=cell(grid, row, lesson_col), room=cell(grid, row, lesson_col + 1))

    schedule = []
    for day, slots in split_days(grid, read_slot):
        layout = reduce_periods(
            slots,
            is_blank=lambda slot: not slot.lesson,
            is_class_hour=lambda slot: contains_class_hour(slot.lesson),
            empty=HalfSlot(),
        )

        lessons = []
        if layout.class_hour is not None:
            lessons.append(_format_slot(layout.class_hour))
        for first, second in layout.pairs:
            rendered = _render_pair(first, second)
            if rendered:
                lessons.append(rendered)

        schedule.append(DaySchedule(
            day=day,
            lessons=lessons,
            start_pair=layout.start_pair,
            has_class_hour=layout.class_hour is not None,
        ))

    log.info(f"Построено расписание группы '{group}': {len(schedule)} дн.")
    return schedule
