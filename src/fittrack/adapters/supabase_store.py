"""Supabase-backed key-value store."""

import json
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from fittrack.services.store import KeyValueStore


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Supabase implementation storing JSON values in a ``kv_store`` table."""

    client: Client
    table_name: str = "kv_store"
    prefix: str = "fittrack_"

    def get(self, key: str, default: object = None) -> object:
        """Return the stored value for a key, or ``default``."""
        response = (
            self.client.table(self.table_name)
            .select("value")
            .eq("key", self.prefix + key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return default
        value = response.data[0].get("value")
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                return default
        return default if value is None else value

    def set(self, key: str, value: object) -> None:
        """Insert or replace the value for a key."""
        self.client.table(self.table_name).upsert(
            {
                "key": self.prefix + key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()

    def delete(self, key: str) -> None:
        """Delete the row for a key."""
        self.client.table(self.table_name).delete().eq(
            "key", self.prefix + key
        ).execute()
