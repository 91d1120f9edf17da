"""JSON file favorites store."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from nutriknow.services.favorites import (
    FavoritesStore,
    decode_favorites,
    encode_favorites,
)

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileFavoritesStore(FavoritesStore):
    """Keeps favorites under a key of a JSON object on local disk."""

    path: Path
    key: str = "favorites"

    def load(self) -> set[str]:
        """Return favorites stored under the key, or an empty set."""
        return decode_favorites(self._read_entries().get(self.key))

    def save(self, favorites: set[str]) -> None:
        """Write favorites under the key, keeping other entries."""
        entries = self._read_entries()
        entries[self.key] = encode_favorites(favorites)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)

    def _read_entries(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError:
            _logger.warning("Ignoring unreadable favorites file: %s", self.path)
            return {}
        if not isinstance(payload, dict):
            _logger.warning("Ignoring favorites file without an object: %s", self.path)
            return {}
        return {key: value for key, value in payload.items() if isinstance(value, str)}
