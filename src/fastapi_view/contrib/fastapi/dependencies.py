"""FastAPI dependencies for the view renderer.

Provides Depends functions for injecting the bound renderer into route handlers.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from ...dispatcher import ViewRenderer
from ...exceptions import ConfigurationError
from .plugin import STATE_ATTRIBUTE


def get_view(request: Request) -> ViewRenderer:
    """Get the renderer bound by ``setup_views``.

    Returns:
        The application's ViewRenderer.

    Raises:
        ConfigurationError: If ``setup_views`` was never called on the app.

    Example:
        ```python
        @router.get("/")
        async def index(view = Depends(get_view)):
            return await view("index.html", {"title": "Home"})
        ```
    """
    renderer = getattr(request.app.state, STATE_ATTRIBUTE, None)
    if renderer is None:
        raise ConfigurationError("views are not set up on this application")
    return renderer  # type: ignore[no-any-return]


View = Annotated[ViewRenderer, Depends(get_view)]


__all__: list[str] = [
    "View",
    "get_view",
]
