"""ASGI entrypoint for the MacroTrack API."""

from macrotrack.api.app import create_app
from macrotrack.containers import build_container

app = create_app(build_container())
