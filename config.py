import os
from dotenv import load_dotenv

# Определяем путь к файлу .env.

BASE_DIR = os.path.abspath(os.path.dirname(__file__))

# Используем BASE_DIR для поиска файла .env
load_dotenv(os.path.join(BASE_DIR, '.env'))

DATA_DIR = os.path.join(BASE_DIR, 'data')


class Config:
    """
    Класс для хранения конфигурационных переменных.
    Загружает переменные из окружения (из файла .env), у каждой есть значение по умолчанию.
    """
    # --- Источник расписания: страница колледжа со ссылками на xlsx ---
    SITE_BASE_URL = os.getenv('SITE_BASE_URL', 'https://spo-13.mskobr.ru')
    SCHEDULE_PAGE_URL = os.getenv('SCHEDULE_PAGE_URL', 'https://spo-13.mskobr.ru/uchashimsya/raspisanie-kanikuly')
    # Текст ссылки, по которому ищем нужный файл на странице
    SCHEDULE_LINK_TEXT = os.getenv('SCHEDULE_LINK_TEXT', '4,1,2,3курс')
    REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', 15))

    SCHEDULE_FILE_PATH = os.getenv('SCHEDULE_FILE_PATH', os.path.join(DATA_DIR, 'schedule.xlsx'))
    CACHE_FILE_PATH = os.getenv('CACHE_FILE_PATH', os.path.join(DATA_DIR, 'schedule_cache.json'))
    CACHE_DURATION = int(os.getenv('CACHE_DURATION', 600))

    # Москва: UTC+3
    REGION_TIMEDELTA = int(os.getenv('REGION_TIMEDELTA', 3))

    # --- Питание ---
    MEALS_FILE_PATH = os.getenv('MEALS_FILE_PATH', os.path.join(DATA_DIR, 'meals.json'))
    CALORIE_DB_PATH = os.getenv('CALORIE_DB_PATH', os.path.join(DATA_DIR, 'calorieDatabase.json'))
    # День 1 цикла меню
    MEAL_CYCLE_START = os.getenv('MEAL_CYCLE_START', '2025-03-17')
    MEAL_CYCLE_LENGTH = int(os.getenv('MEAL_CYCLE_LENGTH', 14))

    # --- Telegram Bot Configuration ---
    TELEGRAM_BOT_TOKEN = os.getenv('TELEGRAM_BOT_TOKEN')

    # Читаем строку из .env, разделяем по запятой и убираем пустые элементы
    TELEGRAM_ADMIN_IDS = [
        admin_id.strip() for admin_id in os.getenv('TELEGRAM_ADMIN_IDS', '').split(',') if admin_id.strip()
    ]
