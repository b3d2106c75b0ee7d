"""ASGI entrypoint for the Artzyful API."""

from artzyful.api.app import create_app
from artzyful.containers import build_container

app = create_app(build_container())
