"""FastAPI integration for fastapi-view."""

from .dependencies import View, get_view
from .plugin import setup_views

__all__: list[str] = [
    "View",
    "get_view",
    "setup_views",
]
