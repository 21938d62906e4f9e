# app/services/utils/excel_reader.py

import pandas as pd
import logging
from typing import Optional

from app.services.parsers.grid import Grid, grid_from_dataframe

log = logging.getLogger(__name__)

def open_excel_file(file_path: str) -> Optional[pd.ExcelFile]:
    """
    Безопасно открывает Excel-файл и возвращает объект ExcelFile.
    Возвращает None в случае ошибки.
    """
    try:
        log.info(f"Открытие Excel-файла как объекта: {file_path}")
        xls = pd.ExcelFile(file_path, engine='calamine')
        return xls
    except FileNotFoundError:
        log.error(f"Файл не найден по пути: {file_path}")
        return None
    except Exception as e:
        log.error(f"Не удалось открыть Excel-файл '{file_path}'. Ошибка: {e}")
        return None


def read_grid(file_path: str) -> Optional[Grid]:
    """
    Читает первый лист файла как позиционную таблицу (без заголовков колонок).
    Возвращает None, если файл не удалось прочитать.
    """
    xls = open_excel_file(file_path)
    if not xls:
        return None

    try:
        df = pd.read_excel(xls, sheet_name=0, header=None, dtype=object)
        grid = grid_from_dataframe(df)
        log.info(f"Прочитана таблица {len(grid)} строк из '{file_path}'")
        return grid
    except Exception as e:
        log.error(f"Не удалось прочитать лист из '{file_path}': {e}", exc_info=True)
        return None
    finally:
        xls.close()
