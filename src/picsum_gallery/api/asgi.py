"""ASGI entrypoint for the gallery API."""

from picsum_gallery.api.app import create_app
from picsum_gallery.containers import build_container

app = create_app(build_container())
