"""Pydantic models for Picsum image payloads."""

from pydantic import BaseModel, ConfigDict, TypeAdapter, model_validator

from picsum_gallery.domain.images import ImageRecord


class ImagePayload(BaseModel):
    """Image record as sent by the Picsum list endpoint and stored locally."""

    model_config = ConfigDict(extra="ignore")

    id: str
    author: str
    download_url: str | None = None
    url: str | None = None

    @model_validator(mode="after")
    def require_image_url(self) -> "ImagePayload":
        if not self.download_url and not self.url:
            raise ValueError("download_url is required")
        return self

    @classmethod
    def from_record(cls, record: ImageRecord) -> "ImagePayload":
        """Build a payload from a domain record."""
        return cls(id=record.id, author=record.author, download_url=record.download_url)

    def to_record(self) -> ImageRecord:
        """Convert the payload into a domain record."""
        return ImageRecord(
            id=self.id,
            author=self.author,
            download_url=self.download_url or self.url or "",
        )


IMAGE_LIST = TypeAdapter(list[ImagePayload])


def decode_images(raw: bytes) -> list[ImageRecord]:
    """Decode a JSON array of image payloads into records."""
    return [payload.to_record() for payload in IMAGE_LIST.validate_json(raw)]


def encode_images(records: list[ImageRecord]) -> bytes:
    """Encode records as a JSON array using the Picsum field names."""
    payloads = [ImagePayload.from_record(record) for record in records]
    return IMAGE_LIST.dump_json(payloads, exclude_none=True)
