"""Persistence of the gallery list as a single blob."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from picsum_gallery.adapters.picsum_models import decode_images, encode_images
from picsum_gallery.domain.images import ImageRecord

DEFAULT_STORAGE_KEY = "saved_images"

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Persistence interface for opaque blobs keyed by name."""

    def get(self, key: str) -> bytes | None:
        """Return the blob stored under key, if present."""

    def set(self, key: str, value: bytes) -> None:
        """Store a blob under key, replacing any previous value."""


@dataclass
class ImageStorage:
    """Loads and saves the whole image list under one key.

    Reads never fail: a missing or unreadable blob yields an empty list.
    Writes are best-effort and failures are only logged.
    """

    store: KeyValueStore
    key: str = DEFAULT_STORAGE_KEY

    def load(self) -> list[ImageRecord]:
        """Return the persisted images, or an empty list."""
        try:
            raw = self.store.get(self.key)
        except Exception:
            _logger.warning("Failed to read %s", self.key, exc_info=True)
            return []
        if raw is None:
            return []
        try:
            return decode_images(raw)
        except ValidationError:
            _logger.warning("Discarding unreadable %s blob", self.key)
            return []

    def save(self, items: list[ImageRecord]) -> None:
        """Overwrite the persisted images with items."""
        try:
            self.store.set(self.key, encode_images(list(items)))
        except Exception:
            _logger.warning("Failed to write %s", self.key, exc_info=True)
