# app/services/core/meal_plan.py

import json
import logging
import re
from datetime import date
from typing import Dict, List

log = logging.getLogger(__name__)

DEFAULT_CALORIES = 300
DEFAULT_PORTION_WEIGHT = 200


def get_cycle_day(today: date, reference_date: date, cycle_length: int = 14) -> int:
    """Номер дня (1..cycle_length) в повторяющемся цикле меню. День 1 - reference_date."""
    days_since_reference = (today - reference_date).days
    # Остаток в Python всегда неотрицательный, поэтому даты до начала цикла тоже работают
    return days_since_reference % cycle_length + 1


def calculate_calories(description: str, size: str, calorie_db: Dict[str, float]) -> int:
    """
    Оценивает калорийность блюда: вес порции делится поровну между
    ингредиентами, для каждого берется первое совпадение из базы (ккал на 100 г).
    """
    if not description or not size:
        return DEFAULT_CALORIES

    match = re.match(r'\s*(\d+)', str(size))
    total_weight = int(match.group(1)) if match else 0
    total_weight = total_weight or DEFAULT_PORTION_WEIGHT

    ingredients = description.lower().split(', ')
    weight_per_ingredient = total_weight / len(ingredients)
    total_calories = 0.0

    for ingredient in ingredients:
        ingredient = ingredient.strip()
        for key, calories in calorie_db.items():
            if key in ingredient:
                total_calories += (weight_per_ingredient / 100) * calories
                break

    return round(total_calories) or DEFAULT_CALORIES


def _load_json(path: str):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def load_meals_for_day(meals_path: str, calorie_db_path: str, day_number: int) -> List[dict]:
    """Меню на день цикла с рассчитанной калорийностью. При ошибке - пустой список."""
    try:
        meals_data = _load_json(meals_path)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        log.error(f"Не удалось прочитать меню '{meals_path}': {e}")
        return []

    try:
        calorie_db = _load_json(calorie_db_path)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        log.warning(f"База калорийности недоступна ('{calorie_db_path}'): {e}. Используются значения по умолчанию.")
        calorie_db = {}

    if not isinstance(meals_data, dict) or not isinstance(meals_data.get('meals'), list):
        log.error(f"Файл '{meals_path}' не содержит массив meals")
        return []

    day_data = next((d for d in meals_data['meals'] if str(d.get('day')) == str(day_number)), None)
    if not day_data:
        log.info(f"В меню нет данных для дня {day_number}")
        return []

    return [
        {**meal, 'calories': calculate_calories(meal.get('description'), meal.get('size'), calorie_db)}
        for meal in day_data.get('meals', [])
    ]
