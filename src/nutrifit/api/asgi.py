"""ASGI entrypoint for the NutriFit API."""

from nutrifit.api.app import create_app
from nutrifit.containers import build_container

app = create_app(build_container())
