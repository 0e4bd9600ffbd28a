"""ASGI entrypoint for the PhotoCloud API."""

from photo_cloud.api.app import create_app
from photo_cloud.containers import build_container

app = create_app(build_container())
