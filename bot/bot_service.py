import logging
from aiogram import Bot, Dispatcher
from aiogram.filters import CommandStart, Command, CommandObject
from aiogram.types import Message, BotCommand
from aiogram.exceptions import TelegramBadRequest

from config import Config

from app.services.clients import time_service
from app.services.core import schedule_service
from app.services.core.cache_manager import get_grid_data
from app.services.exceptions import ScheduleLookupError
from app.services.utils.enums import ScheduleMode

log = logging.getLogger(__name__)

bot = Bot(token=Config.TELEGRAM_BOT_TOKEN)
dp = Dispatcher()

# Выбор пользователей {user_id: (ScheduleMode, имя)}
user_preferences = {}

TELEGRAM_MESSAGE_LIMIT = 4096


# --- ХЕЛПЕРЫ ---

def get_user_role(user_id: int) -> str:
    """Определяет роль пользователя по его Telegram ID."""
    if str(user_id) in Config.TELEGRAM_ADMIN_IDS:
        return "admin"
    return "user"


def _split_message(text: str) -> list:
    """Режет длинный текст по строкам, чтобы уложиться в лимит Telegram."""
    chunks, current = [], ""
    for line in text.split('\n'):
        if len(current) + len(line) + 1 > TELEGRAM_MESSAGE_LIMIT and current:
            chunks.append(current)
            current = ""
        current = f"{current}\n{line}" if current else line
    if current:
        chunks.append(current)
    return chunks


async def _save_preference(message: Message, command: CommandObject, mode: ScheduleMode):
    name = (command.args or "").strip()
    label = "группы" if mode is ScheduleMode.GROUP else "преподавателя"
    if not name:
        await message.answer(f"Укажите имя {label} после команды, например: /{command.command} 41ИС")
        return

    data = get_grid_data()
    if data.get("error"):
        await message.answer("❌ Расписание сейчас недоступно, попробуйте позже.")
        return

    known = schedule_service.get_identities(data["grid"], mode)
    match = next((item for item in known if item.lower() == name.lower()), None)
    if not match:
        await message.answer(f"⚠️ {name} нет в текущем расписании.")
        return

    user_preferences[message.from_user.id] = (mode, match)
    log.info(f"Пользователь {message.from_user.id} выбрал {mode.value}: '{match}'")
    await message.answer(f"✅ Сохранено: {match}. Расписание - /schedule")


# --- ОБРАБОТЧИКИ КОМАНД ---

@dp.message(CommandStart())
async def command_start_handler(message: Message):
    user_name = message.from_user.first_name
    await message.answer(
        f"👋 Привет, {user_name}!\n"
        "Выберите группу: /group 41ИС или преподавателя: /teacher Иванов А.Б.\n"
        "Затем запросите расписание: /schedule"
    )


@dp.message(Command("group"))
async def command_group_handler(message: Message, command: CommandObject):
    await _save_preference(message, command, ScheduleMode.GROUP)


@dp.message(Command("teacher"))
async def command_teacher_handler(message: Message, command: CommandObject):
    await _save_preference(message, command, ScheduleMode.TEACHER)


@dp.message(Command("schedule"))
async def command_schedule_handler(message: Message):
    preference = user_preferences.get(message.from_user.id)
    if not preference:
        await message.answer("Пожалуйста, укажите группу (/group) или преподавателя (/teacher).")
        return

    data = get_grid_data()
    if data.get("error"):
        await message.answer("❌ Расписание сейчас недоступно, попробуйте позже.")
        return

    mode, name = preference
    grid = data["grid"]
    try:
        days = schedule_service.build_schedule(grid, name, mode)
    except ScheduleLookupError as e:
        await message.answer(f"⚠️ {e.message}. Выберите заново.")
        return

    today = time_service.get_current_day_and_time().date_obj
    header = schedule_service.get_header_info(grid, today)
    title = f"📅 {name}, {header['semester']}, {header['week_range']}"
    for chunk in _split_message(schedule_service.format_schedule_text(days, title=title)):
        await message.answer(chunk)


@dp.message(Command("update"), lambda msg: get_user_role(msg.from_user.id) == 'admin')
async def command_update_handler(message: Message):
    log.info(f"Администратор {message.from_user.id} запустил обновление кэша.")
    result = get_grid_data(force_update=True)
    if result.get("error"):
        text = f"❌ <b>Ошибка обновления</b>\n<code>{result['error']}</code>"
    else:
        text = f"✅ Кэш успешно обновлен ({result.get('updated_at', '—')})."
    await message.answer(text, parse_mode="HTML")

    try:
        await message.delete()
    except TelegramBadRequest as e:
        log.warning(f"Не удалось удалить сообщение с командой /update: {e}")


# --- ФУНКЦИЯ ЗАПУСКА БОТА ---

async def set_main_menu(bot: Bot):
    """Устанавливает команды, которые будут видны в кнопке 'Меню'."""
    main_menu_commands = [
        BotCommand(command="/start", description="👋 Перезапустить бота"),
        BotCommand(command="/group", description="👥 Выбрать группу"),
        BotCommand(command="/teacher", description="🧑‍🏫 Выбрать преподавателя"),
        BotCommand(command="/schedule", description="📅 Расписание"),
    ]
    await bot.set_my_commands(main_menu_commands)


async def main() -> None:
    """Точка входа для запуска бота."""
    logging.info("Запуск Telegram-бота...")
    await set_main_menu(bot)
    await bot.delete_webhook(drop_pending_updates=True)
    await dp.start_polling(bot)
