"""Общие фикстуры: небольшая таблица расписания в формате выгрузки xlsx (header=None)."""

import copy

import pytest


SAMPLE_GRID = [
    ["Расписание занятий 2-й семестр 2024-2025\nна неделю с 3 по 9\nмарта 2025 года"],
    [],
    ["День", "Пара", "41ИС", "Каб", "41ИТ", "Каб.", "42ИС", "Каб"],
    # Понедельник
    ["Понедельник", "1", "Математика Петров В.Г.", "12", "Физика Иванов А.Б.", "5", "", ""],
    ["", "1", "Математика Петров В.Г.", "12", "Физика Иванов А.Б.", "5", "", ""],
    ["", "2", "История Сидорова Е.Ж.", 21.0, "", "", "Физика Иванов А.Б.", "5"],
    ["", "2", "Английский язык Смирнова К.Л.", "30", "", "", "Физика Иванов А.Б.", "5"],
    ["", "3", "", "", "Физика Иванов А.Б.", "5", "Физика Иванов А.Б.", "5"],
    ["", "3", None, None, "", "", "", ""],
    # Вторник
    ["Вторник", "", "Классный час Петров В.Г.", "12"],
    ["", "1"],
    ["", "1", "", ""],
    ["", "2", "Информатика Кузнецов М.Н.", "7"],
    ["", "2"],
]


@pytest.fixture
def sample_grid():
    return copy.deepcopy(SAMPLE_GRID)
