"""Saved-items storage interface."""

from typing import Protocol


class FavoritesStore(Protocol):
    """Interface for reading and toggling saved item ids."""

    def load(self) -> set[str]:
        """Return the saved ids. Empty set if nothing is saved."""
        ...

    def toggle(self, item_id: str) -> set[str]:
        """Save the id if absent, remove it if present. Returns the new set."""
        ...
