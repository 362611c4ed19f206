"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from picsum_gallery.adapters.file_key_value_store import JsonFileKeyValueStore
from picsum_gallery.adapters.picsum_client import HttpxPicsumClient, ImageClient
from picsum_gallery.adapters.supabase_key_value_store import SupabaseKeyValueStore
from picsum_gallery.config import Settings, parse_storage_backend
from picsum_gallery.services.gallery import GalleryStore
from picsum_gallery.services.storage import ImageStorage, KeyValueStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    image_client: ImageClient
    storage: ImageStorage
    gallery_store: GalleryStore
    close_resources: Callable[[], Awaitable[None]]


def build_key_value_store(settings: Settings) -> KeyValueStore:
    """Create the key-value store selected by settings."""
    backend = parse_storage_backend(settings.storage_backend)
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires url and service key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, table=settings.supabase_table)
    return JsonFileKeyValueStore(settings.storage_path)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    storage = ImageStorage(
        build_key_value_store(resolved_settings), key=resolved_settings.storage_key
    )
    image_client = HttpxPicsumClient.create(resolved_settings.images_url)
    gallery_store = GalleryStore(client=image_client, storage=storage)
    gallery_store.initialize()

    async def close_resources() -> None:
        await image_client.close()

    return AppContainer(
        settings=resolved_settings,
        image_client=image_client,
        storage=storage,
        gallery_store=gallery_store,
        close_resources=close_resources,
    )
