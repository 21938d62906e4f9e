# app/services/clients/schedule_site_client.py

import requests
import logging
import os
import re
from enum import Enum, auto
from typing import Optional
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from config import Config
from app.services.utils.schedule_verification import verify_schedule_file

log = logging.getLogger(__name__)


class UpdateStatus(Enum):
    """Статусы завершения операции скачивания файла."""
    SUCCESS = auto()  # Файл успешно скачан и обновлен
    FAILED = auto()  # Произошла ошибка


def _squash(text: str) -> str:
    return re.sub(r'\s+', '', text).lower()


def find_schedule_link(html: str, link_text: str, base_url: str) -> Optional[str]:
    """
    Ищет на странице ссылку на xlsx, видимый текст которой содержит link_text
    (например, "4,1,2,3курс"). Пробелы и вложенные теги внутри ссылки игнорируются.
    """
    wanted = _squash(link_text)
    soup = BeautifulSoup(html or '', 'html.parser')
    for a_tag in soup.find_all('a', href=True):
        href = a_tag['href'].strip()
        if not urlparse(href).path.lower().endswith('.xlsx'):
            continue
        if wanted in _squash(a_tag.get_text()):
            return urljoin(base_url, href)
    return None


def fetch_schedule_link() -> Optional[str]:
    """Загружает страницу расписаний колледжа и достает из нее ссылку на файл."""
    try:
        response = requests.get(Config.SCHEDULE_PAGE_URL, timeout=Config.REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        log.error(f"Не удалось загрузить страницу расписаний '{Config.SCHEDULE_PAGE_URL}': {e}")
        return None

    link = find_schedule_link(response.text, Config.SCHEDULE_LINK_TEXT, Config.SITE_BASE_URL)
    if not link:
        log.error(f"Ссылка на файл для '{Config.SCHEDULE_LINK_TEXT}' не найдена на странице.")
        return None

    log.info(f"Найдена ссылка на расписание: {link}")
    return link


def download_schedule_file(url: str, local_path: str) -> UpdateStatus:
    """
    Скачивает файл расписания во временный файл, проверяет его и только
    после этого заменяет локальную копию.
    """
    temp_path = local_path + ".tmp"

    try:
        os.makedirs(os.path.dirname(local_path) or '.', exist_ok=True)

        log.info(f"Скачиваю файл расписания '{url}'...")
        response = requests.get(url, timeout=Config.REQUEST_TIMEOUT)
        response.raise_for_status()
        with open(temp_path, 'wb') as f:
            f.write(response.content)
        log.info(f"Файл успешно скачан во временное хранилище: {temp_path}")

        # --- Блок верификации и замены ---
        if not verify_schedule_file(temp_path):
            log.error(f"Скачанный файл '{url}' не прошел верификацию. Обновление отменено.")
            return UpdateStatus.FAILED

        os.replace(temp_path, local_path)
        log.info(f"Файл '{url}' успешно скачан и обновлен в '{local_path}'")
        return UpdateStatus.SUCCESS

    # --- Детальная обработка ошибок ---
    except requests.exceptions.RequestException as e:
        log.error(f"Сетевая ошибка при скачивании расписания: {e}")
        return UpdateStatus.FAILED
    except OSError as e:
        log.error(f"Не удалось сохранить файл расписания '{local_path}': {e}")
        return UpdateStatus.FAILED
    finally:
        # Гарантированная очистка временного файла
        if os.path.exists(temp_path):
            try:
                os.remove(temp_path)
            except OSError as e:
                log.error(f"Не удалось удалить временный файл {temp_path}: {e}")
