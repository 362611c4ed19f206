"""Pydantic models for the gallery HTTP API."""

from pydantic import BaseModel, Field

from picsum_gallery.domain.images import ImageRecord


class ImageOut(BaseModel):
    """Image record as returned to clients."""

    id: str
    author: str
    download_url: str

    @classmethod
    def from_record(cls, record: ImageRecord) -> "ImageOut":
        """Build a response model from a domain record."""
        return cls(id=record.id, author=record.author, download_url=record.download_url)


class ImageListOut(BaseModel):
    """Current gallery contents."""

    images: list[ImageOut]


class AddImageOut(BaseModel):
    """Result of adding a random image."""

    image: ImageOut | None = None


class DeleteRequest(BaseModel):
    """Positions to delete."""

    offsets: list[int] = Field(default_factory=list)


class MoveRequest(BaseModel):
    """Positions to move and where to put them."""

    positions: list[int]
    destination: int
