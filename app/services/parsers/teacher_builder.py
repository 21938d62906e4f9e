# app/services/parsers/teacher_builder.py

import logging
from typing import List

from .common_structs import DaySchedule, TeacherEntry
from .grid import Grid, cell, identity_columns, IDENTITY_ROW
from .period_reducer import split_days, reduce_periods

from app.services.exceptions import TeacherNotFound
from app.services.utils.data_validator import contains_class_hour


log = logging.getLogger(__name__)

ROOM_NOT_SPECIFIED = "не указан"


def _merge_entries(*slots: List[TeacherEntry]) -> List[TeacherEntry]:
    """Объединяет записи с одинаковым текстом урока, группы складываются без повторов."""
    merged = {}
    for entries in slots:
        for entry in entries:
            target = merged.setdefault(entry.core, TeacherEntry(core=entry.core))
            for group in entry.groups:
                if group not in target.groups:
                    target.groups.append(group)
    return list(merged.values())


def _render_entry(entry: TeacherEntry) -> str:
    if not entry.groups:
        return entry.core
    if len(entry.groups) == 1:
        return f"{entry.core} (Группа: {entry.groups[0]})"
    return f"{entry.core} (Группы: {', '.join(entry.groups)})"


def build_teacher_schedule(grid: Grid, teacher: str) -> List[DaySchedule]:
    """
    Строит расписание преподавателя: в каждой строке просматриваются колонки
    всех групп, одинаковые уроки разных групп сливаются в одну запись.
    Бросает TeacherNotFound, если преподаватель не встретился ни в одной ячейке.
    """
    needle = str(teacher or '').strip().lower()
    if not needle:
        raise TeacherNotFound(teacher)

    columns = list(identity_columns(grid))

    def read_slot(row: int) -> List[TeacherEntry]:
        found = []
        for col in columns:
            lesson = cell(grid, row, col)
            if not lesson or needle not in lesson.lower():
                continue
            room = cell(grid, row, col + 1) or ROOM_NOT_SPECIFIED
            group = cell(grid, IDENTITY_ROW, col)
            found.append(TeacherEntry(core=f"{lesson} (Каб. {room})", groups=[group] if group else []))
        return _merge_entries(found)

    schedule = []
    for day, slots in split_days(grid, read_slot):
        layout = reduce_periods(
            slots,
            is_blank=lambda entries: not entries,
            is_class_hour=lambda entries: any(contains_class_hour(e.core) for e in entries),
            empty=[],
        )

        lessons = []
        if layout.class_hour is not None:
            lessons.append(' / '.join(_render_entry(e) for e in layout.class_hour))
        for first, second in layout.pairs:
            entries = _merge_entries(first, second)
            if entries:
                lessons.append(' / '.join(_render_entry(e) for e in entries))

        if lessons:
            schedule.append(DaySchedule(
                day=day,
                lessons=lessons,
                start_pair=layout.start_pair,
                has_class_hour=layout.class_hour is not None,
            ))

    if not schedule:
        log.warning(f"Преподаватель '{teacher}' не найден в таблице.")
        raise TeacherNotFound(teacher)

    log.info(f"Построено расписание преподавателя '{teacher}': {len(schedule)} дн.")
    return schedule
