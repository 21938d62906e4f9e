# app/services/utils/schedule_comparator.py

import logging
from dataclasses import asdict
from typing import Dict, List

from app.services.parsers.grid import Grid
from app.services.parsers.group_builder import build_group_schedule
from app.services.parsers.identity_parser import extract_groups

log = logging.getLogger(__name__)


def _schedules_by_group(grid: Grid) -> Dict[str, List[dict]]:
    """Расписание каждой группы таблицы в виде словарей для сравнения."""
    return {
        group: [asdict(day) for day in build_group_schedule(grid, group)]
        for group in extract_groups(grid)
    }


def compare_grids(old_grid: Grid, new_grid: Grid) -> Dict[str, list]:
    """
    Сравнивает две версии таблицы и возвращает группы, у которых что-то поменялось.
    Пустой словарь - изменений нет.
    """
    log.info("Начинаю сравнение старой и новой версии расписания")

    old_schedules = _schedules_by_group(old_grid)
    new_schedules = _schedules_by_group(new_grid)

    old_keys = set(old_schedules.keys())
    new_keys = set(new_schedules.keys())

    changes = {
        'modified': sorted(g for g in old_keys & new_keys if old_schedules[g] != new_schedules[g]),
        'added': sorted(new_keys - old_keys),
        'removed': sorted(old_keys - new_keys),
    }

    # Проверяем, есть ли вообще изменения
    if not any(changes.values()):
        log.info("Изменений в расписании не обнаружено.")
        return {}

    log.info(
        f"Обнаружены изменения в расписании: {len(changes['modified'])} изм., {len(changes['added'])} доб., {len(changes['removed'])} убрано.")
    return changes
