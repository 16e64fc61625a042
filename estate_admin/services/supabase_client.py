"""Supabase client wrapper and key-value table helpers."""

import os
import logging
from typing import Optional
from supabase import create_client, Client
from supabase.client import ClientOptions
from estate_admin.utils.errors import SupabaseError

logger = logging.getLogger(__name__)

# Global client instance (singleton pattern)
_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """Get or create Supabase client singleton."""
    global _client

    if _client is None:
        url = os.environ.get("SUPABASE_URL")
        key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY")

        if not url or not key:
            raise SupabaseError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        options = ClientOptions(
            auto_refresh_token=False,
            persist_session=False,
        )

        _client = create_client(url, key, options)
        logger.info("Supabase client initialized", extra={"url": url})

    return _client


async def close_supabase_client() -> None:
    """Drop the cached client."""
    global _client
    if _client:
        _client = None
        logger.info("Supabase client closed")


class SupabaseClient:
    """Async context manager for Supabase client."""

    def __init__(self):
        self.client: Optional[Client] = None

    async def __aenter__(self) -> Client:
        self.client = get_supabase_client()
        return self.client

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            logger.error(
                "Supabase operation error",
                extra={"error": str(exc_val), "type": exc_type.__name__}
            )
        return False


# Key-value table operations (one row per entity collection)
async def get_kv_payload(table: str, key: str) -> Optional[str]:
    """Get the stored payload for a key, or None if the key was never written."""
    async with SupabaseClient() as client:
        try:
            result = client.table(table).select("value").eq("key", key).execute()
        except Exception as e:
            raise SupabaseError(f"Failed to read {key}: {e}")
        if result.data and len(result.data) > 0:
            return result.data[0]["value"]
        return None


async def upsert_kv_payload(table: str, key: str, payload: str) -> None:
    """Overwrite the payload stored under a key."""
    async with SupabaseClient() as client:
        try:
            client.table(table).upsert({"key": key, "value": payload}).execute()
        except Exception as e:
            raise SupabaseError(f"Failed to write {key}: {e}")


async def delete_kv_payload(table: str, key: str) -> None:
    """Remove a key and its payload."""
    async with SupabaseClient() as client:
        try:
            client.table(table).delete().eq("key", key).execute()
        except Exception as e:
            raise SupabaseError(f"Failed to delete {key}: {e}")
