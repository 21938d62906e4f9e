# app/services/utils/enums.py

from enum import Enum

class ScheduleMode(Enum):
    """Режим просмотра расписания: по группе или по преподавателю."""
    GROUP = "group"
    TEACHER = "teacher"
