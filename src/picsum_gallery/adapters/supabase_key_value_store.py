"""Supabase implementation of the key-value store."""

import json
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from picsum_gallery.services.storage import KeyValueStore


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Supabase-backed key-value store, one row per key."""

    client: Client
    table: str = "kv_store"

    def get(self, key: str) -> bytes | None:
        """Return the stored value for key, if present."""
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
        if value is None:
            return None
        if isinstance(value, str):
            return value.encode("utf-8")
        # json/jsonb columns come back already parsed
        return json.dumps(value).encode("utf-8")

    def set(self, key: str, value: bytes) -> None:
        """Insert or replace the value for key."""
        self.client.table(self.table).upsert(
            {
                "key": key,
                "value": value.decode("utf-8"),
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()
