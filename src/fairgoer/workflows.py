"""Shared workflow layer between CLI and Telegram.

Wires config to adapters and hands item snapshots to the pure core.
"""

from .adapters.file_favorites import FileFavoritesStore
from .adapters.http_schedule import HttpScheduleRepository
from .adapters.json_schedule import JsonScheduleRepository
from .config import Config
from .core.facets import Selection
from .core.items import ScheduleItem
from .core.query import BrowseResult, browse, saved
from .ports import FavoritesStore, ScheduleRepository


def get_repository(config: Config) -> ScheduleRepository:
    """Schedule source from config: URL if set, else the JSON file."""
    if config.schedule_url:
        return HttpScheduleRepository(config.schedule_url)
    return JsonScheduleRepository(config.schedule_path)


def get_favorites(config: Config, owner: int | str | None = None) -> FavoritesStore:
    """Favorites store; each Telegram user gets a file of their own."""
    if owner is None:
        return FileFavoritesStore(config.favorites_path)
    path = config.favorites_path
    return FileFavoritesStore(path.with_name(f"{path.stem}-{owner}{path.suffix}"))


def find_item(items: list[ScheduleItem], item_id: str) -> ScheduleItem | None:
    for item in items:
        if item.id == item_id:
            return item
    return None


def run_browse(
    config: Config,
    selection: Selection | None = None,
    query: str = "",
) -> BrowseResult:
    items = get_repository(config).fetch_items()
    return browse(items, selection or Selection(), query)


def run_saved(config: Config, owner: int | str | None = None) -> list[tuple[str, list[ScheduleItem]]]:
    items = get_repository(config).fetch_items()
    return saved(items, get_favorites(config, owner).load())
