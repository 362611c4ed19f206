"""Shared test fixtures."""

import random
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from picsum_gallery.adapters.picsum_client import ImageClient
from picsum_gallery.config import Settings
from picsum_gallery.containers import AppContainer
from picsum_gallery.domain.errors import NetworkError
from picsum_gallery.domain.images import ImageRecord
from picsum_gallery.services.gallery import GalleryStore
from picsum_gallery.services.storage import ImageStorage, KeyValueStore


def make_image(image_id: str, author: str | None = None) -> ImageRecord:
    """Build an image record with predictable fields."""
    return ImageRecord(
        id=image_id,
        author=author or f"Author {image_id}",
        download_url=f"https://picsum.photos/id/{image_id}/5000/3333",
    )


@dataclass
class FakeImageClient(ImageClient):
    """Fake image client returning a fixed catalog."""

    images: list[ImageRecord] = field(default_factory=list)
    error: NetworkError | None = None
    calls: int = 0

    async def fetch_images(self) -> list[ImageRecord]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.images)


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store that records writes."""

    values: dict[str, bytes] = field(default_factory=dict)
    writes: list[tuple[str, bytes]] = field(default_factory=list)

    def get(self, key: str) -> bytes | None:
        return self.values.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.writes.append((key, value))
        self.values[key] = value


@dataclass
class FailingKeyValueStore(KeyValueStore):
    """Key-value store whose every call fails."""

    def get(self, key: str) -> bytes | None:
        raise OSError("disk unavailable")

    def set(self, key: str, value: bytes) -> None:
        raise OSError("disk unavailable")


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        images_url="https://picsum.test/v2/list",
        storage_backend="file",
        storage_path=tmp_path / "gallery",
    )


@pytest.fixture
def key_value_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def image_client() -> FakeImageClient:
    return FakeImageClient(images=[make_image("1"), make_image("2"), make_image("3")])


@pytest.fixture
def gallery_store(
    image_client: FakeImageClient, key_value_store: InMemoryKeyValueStore
) -> GalleryStore:
    store = GalleryStore(
        client=image_client,
        storage=ImageStorage(key_value_store),
        rng=random.Random(7),
    )
    store.initialize()
    return store


@pytest.fixture
def container(
    settings: Settings,
    image_client: FakeImageClient,
    key_value_store: InMemoryKeyValueStore,
    gallery_store: GalleryStore,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        image_client=image_client,
        storage=gallery_store.storage,
        gallery_store=gallery_store,
        close_resources=close_resources,
    )
