"""Picsum image list API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx
from pydantic import ValidationError

from picsum_gallery.adapters.picsum_models import decode_images
from picsum_gallery.domain.errors import BadResponseError, DecodeError, TransportError
from picsum_gallery.domain.images import ImageRecord

PICSUM_LIST_URL = "https://picsum.photos/v2/list"


class ImageClient(Protocol):
    """Interface for fetching the remote image catalog."""

    async def fetch_images(self) -> list[ImageRecord]:
        """Fetch the image catalog and return its records."""


@dataclass
class HttpxPicsumClient(ImageClient):
    """HTTPX-backed Picsum client."""

    images_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, images_url: str = PICSUM_LIST_URL) -> "HttpxPicsumClient":
        """Create a Picsum client with a managed httpx session."""
        return cls(images_url=images_url, http_client=httpx.AsyncClient())

    async def fetch_images(self) -> list[ImageRecord]:
        """Fetch the image list with a single GET request."""
        try:
            response = await self.http_client.get(self.images_url)
        except httpx.DecodingError as exc:
            raise DecodeError("Undecodable response body") from exc
        except httpx.RequestError as exc:
            raise TransportError(str(exc)) from exc
        if not response.is_success:
            raise BadResponseError(response.status_code)
        try:
            return decode_images(response.content)
        except ValidationError as exc:
            raise DecodeError("Malformed image list payload") from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
