# app/services/exceptions.py


class ScheduleLookupError(Exception):
    """Выбранная группа или преподаватель отсутствует в текущем расписании."""

    def __init__(self, identity: str, message: str):
        super().__init__(message)
        self.identity = identity
        self.message = message


class GroupNotFound(ScheduleLookupError):
    def __init__(self, group: str):
        super().__init__(group, f"Группа {group} не найдена")


class TeacherNotFound(ScheduleLookupError):
    def __init__(self, teacher: str):
        super().__init__(teacher, f"Преподаватель {teacher} не найден")
