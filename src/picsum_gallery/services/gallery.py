"""Gallery store managing the user's ordered image list."""

import asyncio
import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass, field

from picsum_gallery.adapters.picsum_client import ImageClient
from picsum_gallery.domain.images import ImageRecord
from picsum_gallery.services.storage import ImageStorage

_logger = logging.getLogger(__name__)


@dataclass
class GalleryStore:
    """Owns the image list and persists it after every change.

    All mutating operations are coroutines serialized by one lock, so the
    list has a single owner even while a fetch is suspended.
    """

    client: ImageClient
    storage: ImageStorage
    rng: random.Random = field(default_factory=random.Random)
    _items: list[ImageRecord] = field(default_factory=list, init=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False)

    @property
    def items(self) -> tuple[ImageRecord, ...]:
        """Snapshot of the current list in display order."""
        return tuple(self._items)

    def initialize(self) -> None:
        """Replace the in-memory list with the persisted one."""
        self._items = self.storage.load()
        _logger.info("Gallery loaded with %s images", len(self._items))

    def get(self, image_id: str) -> ImageRecord | None:
        """Return the image with the given id, if present."""
        for item in self._items:
            if item.id == image_id:
                return item
        return None

    async def add_random_image(self) -> ImageRecord | None:
        """Append a random fetched image that is not already in the list."""
        async with self._lock:
            fetched = await self.client.fetch_images()
            candidates = _unseen(fetched, {item.id for item in self._items})
            if not candidates:
                _logger.info(
                    "No new image to add (fetched=%s, existing=%s)",
                    len(fetched),
                    len(self._items),
                )
                return None
            pick = self.rng.choice(candidates)
            self._items.append(pick)
            self.storage.save(self._items)
            _logger.info("Added image %s by %s", pick.id, pick.author)
            return pick

    async def delete_at(self, offsets: Iterable[int]) -> None:
        """Remove the images at the given positions."""
        async with self._lock:
            doomed = _checked_positions(offsets, len(self._items))
            self._items = [
                item for index, item in enumerate(self._items) if index not in doomed
            ]
            self.storage.save(self._items)
            _logger.info("Deleted %s images", len(doomed))

    async def move(self, positions: Iterable[int], destination: int) -> None:
        """Move the images at positions so they sit before destination.

        ``destination`` indexes the list as it was before the move;
        ``len(items)`` moves the images to the end.
        """
        async with self._lock:
            count = len(self._items)
            moving = sorted(_checked_positions(positions, count))
            if destination < 0 or destination > count:
                raise IndexError(f"destination {destination} out of range")
            picked = [self._items[index] for index in moving]
            kept = [
                item for index, item in enumerate(self._items) if index not in moving
            ]
            insert_at = destination - sum(1 for index in moving if index < destination)
            self._items = kept[:insert_at] + picked + kept[insert_at:]
            self.storage.save(self._items)

    async def delete_all(self) -> None:
        """Remove every image."""
        async with self._lock:
            self._items = []
            self.storage.save(self._items)
            _logger.info("Gallery cleared")


def _unseen(fetched: list[ImageRecord], existing_ids: set[str]) -> list[ImageRecord]:
    """Return fetched records whose ids are not yet used, first one per id."""
    candidates: list[ImageRecord] = []
    seen = set(existing_ids)
    for record in fetched:
        if record.id in seen:
            continue
        seen.add(record.id)
        candidates.append(record)
    return candidates


def _checked_positions(positions: Iterable[int], count: int) -> set[int]:
    """Validate positions against a list of count items."""
    checked = set(positions)
    for index in checked:
        if index < 0 or index >= count:
            raise IndexError(f"position {index} out of range for {count} items")
    return checked
