"""Register the view renderer on a FastAPI (or Starlette) application."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ...config import validate_config
from ...dispatcher import ViewRenderer, create_renderer

if TYPE_CHECKING:
    import os
    from collections.abc import Mapping

    from starlette.applications import Starlette

    from ...ports import ITemplateCache

logger = logging.getLogger(__name__)

STATE_ATTRIBUTE = "view"


def setup_views(
    app: Starlette,
    *,
    engine: Mapping[str, Any] | None,
    options: Mapping[str, Any] | None = None,
    templates: str | os.PathLike[str] | None = None,
    max_cache: int | None = None,
    production: bool | None = None,
    cache: ITemplateCache | None = None,
) -> ViewRenderer:
    """Validate the view configuration and bind a renderer to ``app``.

    Call this while building the application; a ConfigurationError here
    means the application must not start serving.

    Args:
        app: The FastAPI or Starlette application.
        engine: ``{identifier: instance}``, e.g. ``{"jinja2": jinja2}``.
        options: Passed verbatim to every compile call.
        templates: Templates directory, defaults to the working directory.
        max_cache: Compiled-template cache capacity, defaults to 100.
        production: Runtime mode, read from ``APP_ENV`` when None.
        cache: Replacement compiled-template cache.

    Returns:
        The bound renderer, also stored as ``app.state.view``.

    Raises:
        ConfigurationError: If the configuration is missing or unsupported.

    Example:
        ```python
        import jinja2
        from fastapi import FastAPI
        from fastapi_view.contrib.fastapi import View, setup_views

        app = FastAPI()
        setup_views(app, engine={"jinja2": jinja2}, templates="templates")

        @app.get("/")
        async def index(view: View):
            return await view("index.html", {"name": "World"})
        ```
    """
    config = validate_config(
        engine,
        options=options,
        templates=templates,
        max_cache=max_cache,
        production=production,
    )
    renderer = create_renderer(config, cache)
    setattr(app.state, STATE_ATTRIBUTE, renderer)
    logger.info("Bound %s to app.state.%s", type(renderer).__name__, STATE_ATTRIBUTE)
    return renderer
