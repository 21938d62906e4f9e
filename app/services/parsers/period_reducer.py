# app/services/parsers/period_reducer.py

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from .grid import Grid, cell, FIRST_LESSON_ROW


@dataclass
class PeriodLayout:
    """Результат свертки половинок дня в пары."""
    class_hour: Optional[Any] = None
    start_pair: int = 1
    pairs: List[Tuple[Any, Any]] = field(default_factory=list)


def split_days(grid: Grid, read_slot: Callable[[int], Any]) -> List[Tuple[str, List[Any]]]:
    """
    Проходит по строкам с уроками и группирует половинки пар по дням.
    Новый день начинается, когда в колонке 0 появляется непустое значение,
    отличное от текущего дня. Строки до первого дня пропускаются.
    """
    days = []
    current_day = None
    for row in range(FIRST_LESSON_ROW, len(grid)):
        day_label = cell(grid, row, 0)
        if day_label and day_label != current_day:
            current_day = day_label
            days.append((current_day, []))
        if current_day is None:
            continue
        # Пустая ячейка тоже добавляется, чтобы не сбить выравнивание половинок
        days[-1][1].append(read_slot(row))
    return days


def reduce_periods(slots: List[Any], is_blank: Callable[[Any], bool],
                   is_class_hour: Callable[[Any], bool], empty: Any) -> PeriodLayout:
    """
    Сворачивает половинки одного дня в пары:
    классный час в начале дня идет отдельно и не пропускается,
    ведущие пустые пары пропускаются с увеличением номера первой пары,
    остальные половинки берутся по две.
    """
    layout = PeriodLayout()
    cursor = 0

    def slot_at(index: int) -> Any:
        return slots[index] if index < len(slots) else empty

    if slots and is_class_hour(slots[0]):
        layout.class_hour = slots[0]
        cursor = 1

    while cursor < len(slots) and is_blank(slot_at(cursor)) and is_blank(slot_at(cursor + 1)):
        cursor += 2
        layout.start_pair += 1

    while cursor < len(slots):
        layout.pairs.append((slot_at(cursor), slot_at(cursor + 1)))
        cursor += 2

    if not layout.pairs:
        layout.start_pair = 1
    return layout
