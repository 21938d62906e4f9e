# app/services/core/cache_manager.py

import json
import logging
import os
import time
from datetime import datetime
from typing import Optional, Tuple
from threading import Lock

from config import Config
from app.utils import make_json_serializable

from app.services.utils.excel_reader import read_grid
from app.services.utils.schedule_comparator import compare_grids

from app.services.clients.schedule_site_client import fetch_schedule_link, download_schedule_file, UpdateStatus


log = logging.getLogger(__name__)
thread_lock = Lock()


def _is_stale(cache_file: str) -> bool:
    try:
        return (time.time() - os.path.getmtime(cache_file)) > Config.CACHE_DURATION
    except FileNotFoundError:
        return True


def _read_cache(cache_file: str) -> Optional[dict]:
    try:
        with open(cache_file, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        log.warning(f"Не удалось прочитать файл кэша '{cache_file}': {e}")
        return None


def get_grid_data(force_update: bool = False) -> dict:
    """
    Главная функция. Возвращает таблицу расписания из кэша или запускает его обновление.
    Результат: {"link": ..., "grid": [[...]], "updated_at": ...} или {"error": ...}.

    :param force_update: Флаг для принудительного обновления, игнорируя CACHE_DURATION.
    """
    cache_file = Config.CACHE_FILE_PATH

    try:
        os.makedirs(os.path.dirname(cache_file) or '.', exist_ok=True)
    except OSError as e:
        log.critical(f"Критическая ошибка: не удалось создать директорию для кэша '{cache_file}': {e}")
        return {"error": f"Не удалось создать рабочую директорию: {e}"}

    if _is_stale(cache_file) or force_update:
        if force_update:
            log.warning("Принудительное обновление кэша расписания инициировано.")

        with thread_lock:
            # Повторно проверяем, не обновил ли кто-то кэш, пока мы ждали блокировку.
            if _is_stale(cache_file) or force_update:
                log.info("Блокировка получена. Начинаю обновление кэша расписания.")
                success, message = _update_cache_file(cache_file)
                if not success:
                    if not os.path.exists(cache_file):
                        return {"error": message}
                    log.warning(f"{message} Используется старая копия кэша.")
            else:
                log.info("Блокировка получена, но кэш уже обновлен другим потоком. Обновление пропущено.")

    data = _read_cache(cache_file)
    if data is None or not isinstance(data.get('grid'), list):
        error_message = "Критическая ошибка: не удалось прочитать файл кэша расписания."
        log.error(error_message)
        return {"error": error_message}

    log.info("Загрузка таблицы расписания из файла кэша.")
    return data


def _update_cache_file(cache_file: str) -> Tuple[bool, str]:
    """
    Внутренняя функция: находит актуальную ссылку, при необходимости
    скачивает файл, парсит его и сохраняет таблицу в кэш.
    """
    local_path = Config.SCHEDULE_FILE_PATH
    old_data = _read_cache(cache_file) if os.path.exists(cache_file) else None

    # --- ШАГ 1: ИЩЕМ ССЫЛКУ НА АКТУАЛЬНЫЙ ФАЙЛ ---
    link = fetch_schedule_link()
    if not link:
        return False, "Не удалось найти ссылку на файл расписания."

    # Ссылка не поменялась - файл тот же, просто "освежаем" кэш
    if old_data and old_data.get('link') == link:
        os.utime(cache_file, None)
        log.info("Расписание актуально. Обновление кэша пропущено.")
        return True, "Ссылка на расписание не изменилась."

    log.info("Обнаружено обновление расписания.")

    # --- ШАГ 2: СКАЧИВАЕМ И ЧИТАЕМ ФАЙЛ ---
    if download_schedule_file(link, local_path) == UpdateStatus.FAILED:
        return False, f"Не удалось скачать файл расписания '{link}'."

    grid = read_grid(local_path)
    if grid is None:
        return False, f"Не удалось прочитать файл расписания '{local_path}'."

    # --- ШАГ 3: СРАВНЕНИЕ СО СТАРОЙ ВЕРСИЕЙ ---
    if old_data and isinstance(old_data.get('grid'), list):
        try:
            changes = compare_grids(old_data['grid'], grid)
            if changes:
                log.warning(f"Обнаружены изменения в расписании: {changes}")
        except Exception as e:
            log.error(f"Ошибка при сравнении расписаний: {e}", exc_info=True)

    # --- ШАГ 4: СОХРАНЕНИЕ В КЭШ ---
    payload = make_json_serializable({
        "link": link,
        "grid": grid,
        "updated_at": datetime.now(),
    })
    temp_cache_file = cache_file + ".tmp"
    with open(temp_cache_file, 'w', encoding='utf-8') as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)

    os.replace(temp_cache_file, cache_file)
    msg = "Кэш расписания успешно обновлен."
    log.info(msg)
    return True, msg
