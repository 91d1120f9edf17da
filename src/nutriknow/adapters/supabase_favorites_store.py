"""Supabase-backed favorites store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutriknow.services.favorites import (
    FavoritesStore,
    decode_favorites,
    encode_favorites,
)


@dataclass
class SupabaseFavoritesStore(FavoritesStore):
    """Stores favorites as a single row of a key-value table."""

    client: Client
    key: str = "favorites"
    table: str = "kv_store"

    def load(self) -> set[str]:
        """Return favorites from the key's row, if present."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", self.key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return set()
        return decode_favorites(response.data[0].get("value"))

    def save(self, favorites: set[str]) -> None:
        """Upsert the key's row with the encoded favorites."""
        response = (
            self.client.table(self.table)
            .upsert(
                {
                    "key": self.key,
                    "value": encode_favorites(favorites),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="key",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save favorites to Supabase")
