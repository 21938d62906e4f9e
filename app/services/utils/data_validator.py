import re


ROOM_LABELS = {'каб', 'каб.'}
CLASS_HOUR_MARKER = 'классный час'

TEACHER_NAME_PATTERN = re.compile(r'[А-ЯЁ][а-яё]+ [А-ЯЁ]\.[А-ЯЁ]\.')


def is_room_label(s: str) -> bool:
    """Заголовок колонки кабинетов ('Каб', 'Каб.'), а не название группы."""
    return str(s).strip().lower() in ROOM_LABELS


def is_teacher_name(s: str) -> bool:
    """
    Проверяет, соответствует ли строка формату "Фамилия И.О.".
    Пример: 'Иванов А.Б.' -> True, 'Математика' -> False.
    """
    return TEACHER_NAME_PATTERN.fullmatch(str(s).strip()) is not None


def teacher_candidate(lesson: str) -> str:
    """Последние два слова ячейки урока - там обычно записан преподаватель."""
    return ' '.join(str(lesson).split()[-2:])


def contains_class_hour(s: str) -> bool:
    return CLASS_HOUR_MARKER in str(s).lower()
