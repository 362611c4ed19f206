"""Domain models for the image gallery."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageRecord:
    """Represents a single catalog image."""

    id: str
    author: str
    download_url: str
