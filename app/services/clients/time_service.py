# app/services/clients/time_service.py

import requests
import logging
from datetime import datetime, timedelta, time, date
from config import Config
from dataclasses import dataclass


log = logging.getLogger(__name__)


DAYS_RU = ["Понедельник", "Вторник", "Среда", "Четверг", "Пятница", "Суббота", "Воскресенье"]
MONTHS_RU = [
    "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря"
]
TIME_SYNC_URL = "https://yandex.com/time/sync.json"


@dataclass(frozen=True)
class CurrentTimeInfo:
    """Текущие дата и время в часовом поясе колледжа."""
    day_name: str
    date_str_display: str  # '17 марта 2025 г.' - для показа пользователю
    date_obj: date  # для расчета семестра и дня цикла меню
    time_obj: time


def _fetch_utc_now() -> datetime:
    response = requests.head(TIME_SYNC_URL, timeout=5)
    response.raise_for_status()
    gmt_time_str = response.headers.get('Date')
    if not gmt_time_str:
        raise ValueError("Header 'Date' is missing")
    return datetime.strptime(gmt_time_str, '%a, %d %b %Y %H:%M:%S GMT')


def get_current_day_and_time() -> CurrentTimeInfo:
    """Определяет текущий день недели, дату и время (по Яндексу, иначе системные)."""
    try:
        local_datetime = _fetch_utc_now() + timedelta(hours=Config.REGION_TIMEDELTA)
        log.info("Время успешно получено от Яндекса.")
    except (requests.exceptions.RequestException, ValueError) as e:
        log.warning(f"Не удалось получить время от Яндекса ({e}). Используется системное время.")
        local_datetime = datetime.now()

    return CurrentTimeInfo(
        day_name=DAYS_RU[local_datetime.weekday()],
        date_str_display=f"{local_datetime.day} {MONTHS_RU[local_datetime.month - 1]} {local_datetime.year} г.",
        date_obj=local_datetime.date(),
        time_obj=local_datetime.time()
    )
