"""ASGI entrypoint for the natrack API."""

from natrack.api.app import create_app
from natrack.containers import build_container

app = create_app(build_container())
