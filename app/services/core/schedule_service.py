# app/services/core/schedule_service.py

from datetime import date
from typing import List, Optional, Union

from app.services.parsers.common_structs import DaySchedule
from app.services.parsers.grid import Grid
from app.services.parsers.group_builder import build_group_schedule
from app.services.parsers.header_parser import extract_semester_info, extract_week_range
from app.services.parsers.identity_parser import extract_groups, extract_teachers
from app.services.parsers.teacher_builder import build_teacher_schedule
from app.services.utils.enums import ScheduleMode


def _as_mode(mode: Union[ScheduleMode, str]) -> ScheduleMode:
    return mode if isinstance(mode, ScheduleMode) else ScheduleMode(str(mode).lower())


def get_identities(grid: Grid, mode: Union[ScheduleMode, str]) -> List[str]:
    """Список групп или преподавателей для выбора."""
    if _as_mode(mode) is ScheduleMode.TEACHER:
        return extract_teachers(grid)
    return extract_groups(grid)


def build_schedule(grid: Grid, identity: str, mode: Union[ScheduleMode, str]) -> List[DaySchedule]:
    """
    Строит расписание для выбранной группы или преподавателя.
    Пробрасывает GroupNotFound / TeacherNotFound.
    """
    if _as_mode(mode) is ScheduleMode.TEACHER:
        return build_teacher_schedule(grid, identity)
    return build_group_schedule(grid, identity)


def get_header_info(grid: Grid, today: Optional[date] = None) -> dict:
    return {
        "semester": extract_semester_info(grid, today),
        "week_range": extract_week_range(grid),
    }


def format_schedule_text(days: List[DaySchedule], title: Optional[str] = None) -> str:
    """Текстовое представление расписания для чат-ботов: пары нумеруются с start_pair."""
    lines = [title] if title else []
    for day in days:
        if lines:
            lines.append('')
        lines.append(day.day)
        if not day.lessons:
            lines.append('  Занятий нет')
            continue

        lessons = day.lessons
        if day.has_class_hour:
            lines.append(f"  Классный час: {lessons[0]}")
            lessons = lessons[1:]
        for number, lesson in enumerate(lessons, start=day.start_pair):
            lines.append(f"  {number} пара: {lesson}")
    return '\n'.join(lines)
