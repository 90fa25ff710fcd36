"""ASGI entrypoint, e.g. ``uvicorn grow_your_tree.api.asgi:app``."""

from grow_your_tree.api.app import create_app
from grow_your_tree.config import Settings
from grow_your_tree.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
