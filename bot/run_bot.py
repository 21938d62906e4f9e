import asyncio
import logging
import sys
import os

# Добавляем корневую папку проекта в путь, чтобы можно было импортировать config и app
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import Config


log = logging.getLogger(__name__)

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, stream=sys.stdout)

    if not Config.TELEGRAM_BOT_TOKEN:
        log.error("TELEGRAM_BOT_TOKEN должен быть установлен в .env")
        sys.exit(1)

    # bot_service создает Bot при импорте, поэтому импортируем после проверки токена
    from bot_service import main

    asyncio.run(main())
