"""Supabase-backed configuration store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from artzyful.services.catalog import ConfigStore


@dataclass
class SupabaseConfigStore(ConfigStore):
    """Stores records as JSON rows in the ``site_config`` table."""

    client: Client
    table: str = "site_config"

    def get(self, key: str) -> dict[str, object] | None:
        """Return the record stored under key, if present."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        return value if isinstance(value, dict) else None

    def put(self, key: str, value: dict[str, object]) -> None:
        """Upsert the record stored under key."""
        self.client.table(self.table).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()
