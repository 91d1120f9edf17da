"""ASGI entrypoint for the calculator API."""

from nutriknow.api.app import create_app
from nutriknow.containers import build_container

app = create_app(build_container())
