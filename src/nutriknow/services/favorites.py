"""Favorites service backed by an injected key-value store."""

import json
import logging
from dataclasses import dataclass, field
from typing import Protocol

from nutriknow.domain.catalog import Catalog

_logger = logging.getLogger(__name__)


class FavoritesStore(Protocol):
    """Persistence interface for favorite item names."""

    def load(self) -> set[str]:
        """Return the stored favorites, or an empty set when none are stored."""

    def save(self, favorites: set[str]) -> None:
        """Persist the full favorites set."""


def encode_favorites(favorites: set[str]) -> str:
    """Encode favorites as a JSON array with a stable order."""
    return json.dumps(sorted(favorites))


def decode_favorites(raw: object) -> set[str]:
    """Decode a persisted JSON array, falling back to an empty set."""
    if raw is None:
        return set()
    if not isinstance(raw, str):
        _logger.warning("Discarding non-text favorites value: %r", raw)
        return set()
    try:
        payload = json.loads(raw)
    except ValueError:
        _logger.warning("Discarding malformed favorites value: %r", raw)
        return set()
    if not isinstance(payload, list) or not all(
        isinstance(name, str) for name in payload
    ):
        _logger.warning("Discarding favorites value with unexpected shape: %r", raw)
        return set()
    return set(payload)


@dataclass
class InMemoryFavoritesStore(FavoritesStore):
    """Process-local favorites store."""

    raw: str | None = None
    saves: int = 0

    def load(self) -> set[str]:
        """Return favorites decoded from the held value."""
        return decode_favorites(self.raw)

    def save(self, favorites: set[str]) -> None:
        """Replace the held value."""
        self.raw = encode_favorites(favorites)
        self.saves += 1


@dataclass
class FavoritesService:
    """Service for toggling and listing favorite catalog items."""

    store: FavoritesStore
    catalog: Catalog
    _favorites: set[str] = field(default_factory=set, init=False)

    def __post_init__(self) -> None:
        self._favorites = set(self.store.load())

    def toggle_favorite(self, item_name: str) -> bool:
        """Flip an item's favorite flag, persist, and return the new flag.

        The in-memory set only changes once the store has saved it.
        """
        is_favorite = item_name not in self._favorites
        updated = set(self._favorites) ^ {item_name}
        self.store.save(set(updated))
        self._favorites = updated
        return is_favorite

    def is_favorite(self, item_name: str) -> bool:
        """Return True when the item is a favorite."""
        return item_name in self._favorites

    def favorites(self) -> list[str]:
        """Return favorites in catalog order, then any stale names sorted."""
        known = [name for name in self.catalog.names() if name in self._favorites]
        stale = sorted(name for name in self._favorites if name not in self.catalog)
        return known + stale
