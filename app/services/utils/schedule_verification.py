# app/services/utils/schedule_verification.py

import logging

from . import excel_reader
from app.services.parsers.grid import IDENTITY_ROW
from app.services.parsers.identity_parser import extract_groups


log = logging.getLogger(__name__)


def verify_schedule_file(file_path: str) -> bool:
    """
    Проверяет, что скачанный Excel-файл похож на расписание:
    первый лист читается и в строке заголовков есть хотя бы одна группа.
    """
    log.info(f"Запущена проверка структуры для файла: {file_path}")

    grid = excel_reader.read_grid(file_path)
    if grid is None:
        return False

    if len(grid) <= IDENTITY_ROW:
        log.error(f"Файл '{file_path}' слишком короткий ({len(grid)} строк). Проверка не пройдена.")
        return False

    groups = extract_groups(grid)
    if not groups:
        log.error(f"В файле '{file_path}' не найдено ни одной группы. Проверка не пройдена.")
        return False

    log.info(f"Файл '{file_path}' успешно прошел проверку. Найдено групп: {len(groups)}.")
    return True
