"""File-based saved-items storage adapter."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileFavoritesStore:
    """
    Saved item ids kept as a JSON list.

    Implements FavoritesStore protocol. A missing or corrupt file reads as
    "nothing saved".
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> set[str]:
        if not self.path.exists():
            return set()
        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading favorites from {self.path}: {e}")
            return set()
        if not isinstance(data, list):
            logger.error(f"Favorites file {self.path} is not a list, ignoring")
            return set()
        return {str(item_id) for item_id in data}

    def save(self, ids: set[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(sorted(ids), indent=2))

    def toggle(self, item_id: str) -> set[str]:
        favorites = self.load()
        if item_id in favorites:
            favorites.discard(item_id)
        else:
            favorites.add(item_id)

        try:
            self.save(favorites)
        except OSError as e:
            logger.error(f"Error saving favorites to {self.path}: {e}")

        return favorites
