"""ASGI entrypoint for the Fridge Chef API."""

from fridge_chef.api.app import create_app
from fridge_chef.containers import build_container

app = create_app(build_container())
