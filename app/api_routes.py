# app/api_routes.py

import logging
from datetime import date
from flask import Blueprint, jsonify

from config import Config
from app.utils import make_json_serializable

from .services.clients import time_service
from .services.core import cache_manager, meal_plan, schedule_service
from .services.exceptions import ScheduleLookupError
from .services.utils.enums import ScheduleMode


bp = Blueprint('api', __name__, url_prefix='/api')
log = logging.getLogger(__name__)


def _load_grid():
    """Таблица из кэша или (None, ответ с ошибкой)."""
    all_data = cache_manager.get_grid_data()
    if all_data.get("error"):
        return None, (jsonify({"error": "Failed to get schedule data"}), 500)
    return all_data["grid"], None


@bp.route('/meta')
def get_meta():
    """Семестр и диапазон дат недели из заголовка таблицы."""
    grid, error = _load_grid()
    if error:
        return error
    today = time_service.get_current_day_and_time().date_obj
    return jsonify(schedule_service.get_header_info(grid, today))


@bp.route('/groups')
def get_groups():
    grid, error = _load_grid()
    if error:
        return error
    return jsonify(schedule_service.get_identities(grid, ScheduleMode.GROUP))


@bp.route('/teachers')
def get_teachers():
    grid, error = _load_grid()
    if error:
        return error
    return jsonify(schedule_service.get_identities(grid, ScheduleMode.TEACHER))


@bp.route('/schedule/<mode>/<path:name>')
def get_schedule(mode, name):
    """Расписание группы или преподавателя в JSON."""
    log.info(f"API request for schedule: mode='{mode}', name='{name}'")

    try:
        schedule_mode = ScheduleMode(mode.lower())
    except ValueError:
        return jsonify({"error": f"Unknown mode '{mode}'"}), 400

    grid, error = _load_grid()
    if error:
        return error

    try:
        schedule = schedule_service.build_schedule(grid, name, schedule_mode)
    except ScheduleLookupError as e:
        return jsonify({"error": e.message}), 404

    log.info(f"API: Расписание для '{name}' успешно отправлено.")
    return jsonify(make_json_serializable(schedule))


@bp.route('/meals')
def get_meals():
    """Меню столовой на текущий день цикла."""
    today = time_service.get_current_day_and_time().date_obj
    reference = date.fromisoformat(Config.MEAL_CYCLE_START)
    day_number = meal_plan.get_cycle_day(today, reference, Config.MEAL_CYCLE_LENGTH)
    meals = meal_plan.load_meals_for_day(Config.MEALS_FILE_PATH, Config.CALORIE_DB_PATH, day_number)
    return jsonify({"day": f"День {day_number}", "meals": meals})
