# app/utils.py

from datetime import date, datetime
from dataclasses import is_dataclass, asdict
from enum import Enum


def make_json_serializable(data):
    """
    Рекурсивно преобразует объекты, которые не сериализуются в JSON,
    в подходящий формат (строки, словари, списки).
    """
    # Дата-классы (DaySchedule и т.п.) - первыми, их вложенные поля обрабатываются рекурсивно
    if is_dataclass(data) and not isinstance(data, type):
        return make_json_serializable(asdict(data))

    if isinstance(data, dict):
        return {k: make_json_serializable(v) for k, v in data.items()}
    if isinstance(data, (list, tuple, set)):
        return [make_json_serializable(i) for i in data]
    if isinstance(data, datetime):
        return data.isoformat(timespec='seconds')
    if isinstance(data, date):
        return data.isoformat()
    if isinstance(data, Enum):
        return data.value

    return data
