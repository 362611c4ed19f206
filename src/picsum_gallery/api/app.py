"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from picsum_gallery.api.models import (
    AddImageOut,
    DeleteRequest,
    ImageListOut,
    ImageOut,
    MoveRequest,
)
from picsum_gallery.app_logging import configure_logging
from picsum_gallery.containers import AppContainer
from picsum_gallery.domain.errors import NetworkError
from picsum_gallery.services.gallery import GalleryStore


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/images")
    async def list_images(request: Request) -> ImageListOut:
        """Return the gallery in display order."""
        return _image_list(_store(request))

    @app.get("/images/{image_id}")
    async def get_image(image_id: str, request: Request) -> ImageOut:
        """Return a single image for full-screen display."""
        record = _store(request).get(image_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return ImageOut.from_record(record)

    @app.post("/images/random")
    async def add_random_image(request: Request) -> AddImageOut:
        """Fetch the catalog and append one unseen image."""
        try:
            record = await _store(request).add_random_image()
        except NetworkError as exc:
            logger.warning("Image fetch failed: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Image service unavailable",
            ) from exc
        if record is None:
            return AddImageOut()
        return AddImageOut(image=ImageOut.from_record(record))

    @app.post("/images/delete")
    async def delete_images(payload: DeleteRequest, request: Request) -> ImageListOut:
        """Delete the images at the given positions."""
        store = _store(request)
        try:
            await store.delete_at(payload.offsets)
        except IndexError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return _image_list(store)

    @app.post("/images/move")
    async def move_images(payload: MoveRequest, request: Request) -> ImageListOut:
        """Reorder images."""
        store = _store(request)
        try:
            await store.move(payload.positions, payload.destination)
        except IndexError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return _image_list(store)

    @app.delete("/images")
    async def delete_all_images(request: Request) -> ImageListOut:
        """Remove every image."""
        store = _store(request)
        await store.delete_all()
        return _image_list(store)

    return app


def _store(request: Request) -> GalleryStore:
    container: AppContainer = request.app.state.container
    return container.gallery_store


def _image_list(store: GalleryStore) -> ImageListOut:
    return ImageListOut(images=[ImageOut.from_record(item) for item in store.items])
