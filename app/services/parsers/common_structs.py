# app/services/parsers/common_structs.py

from dataclasses import dataclass, field
from typing import List


@dataclass
class DaySchedule:
    """
    Расписание на один день для выбранной группы или преподавателя.
    Если has_class_hour, то lessons[0] - классный час, а нумерация пар
    начинается со следующего элемента.
    """
    day: str
    lessons: List[str] = field(default_factory=list)
    start_pair: int = 1
    has_class_hour: bool = False


@dataclass(frozen=True)
class HalfSlot:
    """Одна физическая строка таблицы для колонки группы: урок и кабинет."""
    lesson: str = ''
    room: str = ''


@dataclass
class TeacherEntry:
    """Урок преподавателя (текст + кабинет) и группы, у которых он идет."""
    core: str
    groups: List[str] = field(default_factory=list)
