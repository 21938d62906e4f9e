"""Тесты цикла меню столовой и расчета калорийности."""

import json
from datetime import date, timedelta

import pytest

from app.services.core.meal_plan import get_cycle_day, calculate_calories, load_meals_for_day


REFERENCE = date(2025, 3, 17)
CALORIE_DB = {"курица": 200, "рис": 130, "морковь": 40}


class TestCycleDay:
    @pytest.mark.parametrize("offset, expected", [(0, 1), (3, 4), (13, 14), (14, 1), (29, 2), (-1, 14), (-14, 1)])
    def test_position_in_cycle(self, offset, expected):
        assert get_cycle_day(REFERENCE + timedelta(days=offset), REFERENCE) == expected

    def test_custom_length(self):
        assert get_cycle_day(REFERENCE + timedelta(days=7), REFERENCE, cycle_length=7) == 1


class TestCalories:
    def test_weight_split_between_ingredients(self):
        assert calculate_calories("Курица, рис", "200 г", CALORIE_DB) == 330

    def test_first_matching_key_wins(self):
        assert calculate_calories("курица с рисом", "100", CALORIE_DB) == 200

    def test_unknown_size_uses_default_weight(self):
        assert calculate_calories("морковь", "порция", CALORIE_DB) == 80

    def test_defaults(self):
        assert calculate_calories("", "200", CALORIE_DB) == 300
        assert calculate_calories("курица", "", CALORIE_DB) == 300
        assert calculate_calories("компот", "200", CALORIE_DB) == 300


class TestLoadMeals:
    def _write(self, path, data):
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return str(path)

    def test_meals_for_day(self, tmp_path):
        meals = self._write(tmp_path / "meals.json", {"meals": [
            {"day": "1", "meals": [{"meal": "Обед", "description": "курица, рис", "size": "200", "image_url": "x"}]},
            {"day": "2", "meals": []},
        ]})
        db = self._write(tmp_path / "calories.json", CALORIE_DB)

        assert load_meals_for_day(meals, db, 1) == [
            {"meal": "Обед", "description": "курица, рис", "size": "200", "image_url": "x", "calories": 330},
        ]
        assert load_meals_for_day(meals, db, 2) == []
        assert load_meals_for_day(meals, db, 5) == []

    def test_missing_calorie_db_uses_defaults(self, tmp_path):
        meals = self._write(tmp_path / "meals.json", {"meals": [
            {"day": "1", "meals": [{"meal": "Обед", "description": "курица", "size": "200"}]},
        ]})
        assert load_meals_for_day(meals, str(tmp_path / "нет.json"), 1)[0]["calories"] == 300

    def test_broken_files(self, tmp_path):
        broken = tmp_path / "meals.json"
        broken.write_text("{не json", encoding="utf-8")
        assert load_meals_for_day(str(broken), "", 1) == []
        assert load_meals_for_day(str(tmp_path / "нет.json"), "", 1) == []
        assert load_meals_for_day(self._write(tmp_path / "list.json", []), "", 1) == []
