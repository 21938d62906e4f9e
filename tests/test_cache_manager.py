"""Тесты кэша таблицы расписания: обновление по ссылке, пропуск и откат на старую копию."""

import json
import os

import pytest

from app.services.core import cache_manager
from app.services.parsers.grid import normalize_grid
from app.services.clients.schedule_site_client import UpdateStatus


@pytest.fixture
def cache_env(monkeypatch, tmp_path, sample_grid):
    """Подменяет пути и внешние вызовы; возвращает журнал вызовов."""
    calls = {"download": 0, "link": "https://spo-13.mskobr.ru/files/a.xlsx", "status": UpdateStatus.SUCCESS}

    monkeypatch.setattr(cache_manager.Config, "CACHE_FILE_PATH", str(tmp_path / "cache" / "schedule_cache.json"))
    monkeypatch.setattr(cache_manager.Config, "SCHEDULE_FILE_PATH", str(tmp_path / "schedule.xlsx"))
    monkeypatch.setattr(cache_manager.Config, "CACHE_DURATION", 600)

    def fake_download(url, local_path):
        calls["download"] += 1
        return calls["status"]

    monkeypatch.setattr(cache_manager, "fetch_schedule_link", lambda: calls["link"])
    monkeypatch.setattr(cache_manager, "download_schedule_file", fake_download)
    monkeypatch.setattr(cache_manager, "read_grid", lambda path: normalize_grid(sample_grid))
    return calls


def test_first_call_builds_cache(cache_env, sample_grid):
    data = cache_manager.get_grid_data()

    assert data["grid"] == normalize_grid(sample_grid)
    assert data["link"] == cache_env["link"]
    assert "updated_at" in data
    assert cache_env["download"] == 1
    assert os.path.exists(cache_manager.Config.CACHE_FILE_PATH)


def test_fresh_cache_is_served_without_update(cache_env):
    cache_manager.get_grid_data()
    cache_manager.get_grid_data()
    assert cache_env["download"] == 1


def test_same_link_skips_download(cache_env):
    cache_manager.get_grid_data()
    data = cache_manager.get_grid_data(force_update=True)
    assert cache_env["download"] == 1
    assert data["link"] == cache_env["link"]


def test_new_link_downloads_again(cache_env):
    cache_manager.get_grid_data()
    cache_env["link"] = "https://spo-13.mskobr.ru/files/b.xlsx"
    data = cache_manager.get_grid_data(force_update=True)
    assert cache_env["download"] == 2
    assert data["link"].endswith("b.xlsx")


def test_failure_without_cache_is_error(cache_env):
    cache_env["status"] = UpdateStatus.FAILED
    data = cache_manager.get_grid_data()
    assert "error" in data


def test_failure_with_cache_serves_old_copy(cache_env, sample_grid):
    cache_manager.get_grid_data()
    cache_env["link"] = None
    data = cache_manager.get_grid_data(force_update=True)
    assert data["grid"] == normalize_grid(sample_grid)


def test_broken_cache_file_is_error(cache_env):
    cache_manager.get_grid_data()
    with open(cache_manager.Config.CACHE_FILE_PATH, "w", encoding="utf-8") as f:
        f.write("{битый json")
    assert "error" in cache_manager.get_grid_data()


def test_cache_is_utf8_json(cache_env):
    cache_manager.get_grid_data()
    with open(cache_manager.Config.CACHE_FILE_PATH, encoding="utf-8") as f:
        assert "Понедельник" in f.read()
    with open(cache_manager.Config.CACHE_FILE_PATH, encoding="utf-8") as f:
        assert json.load(f)["grid"][2][2] == "41ИС"
