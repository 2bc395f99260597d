"""Tests for the shared workflow layer."""

import json

import pytest

from fairgoer.adapters.file_favorites import FileFavoritesStore
from fairgoer.adapters.http_schedule import HttpScheduleRepository
from fairgoer.adapters.json_schedule import JsonScheduleRepository
from fairgoer.config import Config
from fairgoer.core.facets import Selection
from fairgoer.workflows import (
    find_item,
    get_favorites,
    get_repository,
    run_browse,
    run_saved,
)


@pytest.fixture
def config(tmp_path):
    schedule = tmp_path / "schedule.json"
    schedule.write_text(json.dumps([
        {"id": "1", "title": "Market Hogs", "day": "Tuesday", "division": "Swine",
         "location": "Show Arena", "time": "8:30 AM", "classGroup": "Market"},
        {"id": "2", "title": "Dairy Heifers", "day": "Monday", "division": "Dairy",
         "location": "Dairy Ring", "time": "9:00 AM", "classGroup": "Holstein"},
    ]))
    return Config(schedule_file=str(schedule), favorites_file=str(tmp_path / "favorites.json"))


class TestGetRepository:
    def test_file_by_default(self, config):
        repo = get_repository(config)
        assert isinstance(repo, JsonScheduleRepository)
        assert repo.path == config.schedule_path

    def test_url_wins(self, config):
        config.schedule_url = "https://example.org/schedule.json"
        assert isinstance(get_repository(config), HttpScheduleRepository)


class TestGetFavorites:
    def test_default_store(self, config):
        store = get_favorites(config)
        assert isinstance(store, FileFavoritesStore)
        assert store.path == config.favorites_path

    def test_per_owner_store(self, config, tmp_path):
        assert get_favorites(config, 42).path == tmp_path / "favorites-42.json"


class TestRuns:
    def test_browse(self, config):
        result = run_browse(config, Selection(division="Dairy"))
        assert [i.id for i in result.items] == ["2"]

    def test_saved(self, config):
        get_favorites(config).toggle("1")
        sections = run_saved(config)
        assert [(day, [i.id for i in items]) for day, items in sections] == [("Tuesday", ["1"])]

    def test_find_item(self, config):
        items = get_repository(config).fetch_items()
        assert find_item(items, "2").title == "Dairy Heifers"
        assert find_item(items, "nope") is None
