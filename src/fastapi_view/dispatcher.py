"""Render dispatchers bound to request handlers.

One of two renderers is chosen at setup from the engine contract:

- ``CompiledViewRenderer`` reads template source, compiles it through the
  engine and keeps the result in an LRU cache. The cache is only trusted in
  production; elsewhere every call re-reads and recompiles so template edits
  show up without a restart, while still refreshing the cache entry.
- ``LoadedViewRenderer`` delegates loading and caching to the engine and can
  stream the rendered output.

Neither renderer wraps errors: read, compile and render failures propagate
to the host unchanged.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import anyio
from starlette.responses import HTMLResponse, StreamingResponse

from .cache import LRUTemplateCache
from .engines.registry import EngineContract, create_engine, get_contract
from .exceptions import ConfigurationError, InputError

if TYPE_CHECKING:
    from pathlib import Path

    from .config import ViewConfig
    from .ports import CompiledTemplate, Context, ICompileEngine, ILoadEngine, ITemplateCache

logger = logging.getLogger(__name__)


def resolve_template_path(templates_root: Path, page: str) -> Path:
    """Join a template identifier to the templates root.

    Leading separators are dropped so identifiers always stay under the root.
    """
    return templates_root / page.lstrip("/\\")


async def read_template(path: Path) -> str:
    """Read template source without blocking the event loop."""
    return await anyio.Path(path).read_text(encoding="utf-8")


def as_context(data: Any) -> Context:
    """Turn render data into a template context mapping."""
    if isinstance(data, Mapping):
        return data
    model_dump = getattr(data, "model_dump", None)
    if callable(model_dump):
        return model_dump()  # type: ignore[no-any-return]
    raise TypeError(f"Render data must be a mapping, got {type(data).__name__}")


def _check_input(page: str | None, data: Any) -> None:
    # an empty mapping is valid data, other falsy values are not
    if not page or data is None or (not data and not isinstance(data, Mapping)):
        raise InputError("missing data")


async def _invoke(compiled: CompiledTemplate, context: Context) -> str:
    result = compiled(context)
    if inspect.isawaitable(result):
        result = await result
    return result  # type: ignore[return-value]


class CompiledViewRenderer:
    """Renderer for compile-then-call engines."""

    contract = EngineContract.COMPILE

    def __init__(
        self,
        engine: ICompileEngine,
        config: ViewConfig,
        cache: ITemplateCache | None = None,
    ) -> None:
        self._engine = engine
        self._config = config
        self._cache: ITemplateCache = (
            cache if cache is not None else LRUTemplateCache(config.max_cache)
        )

    @property
    def cache(self) -> ITemplateCache:
        return self._cache

    @property
    def config(self) -> ViewConfig:
        return self._config

    async def __call__(self, page: str, data: Any) -> HTMLResponse:
        """Render ``page`` with ``data`` into an HTML response.

        Raises:
            InputError: If ``page`` or ``data`` is missing.
            OSError: If the template cannot be read (propagated unchanged).
        """
        _check_input(page, data)
        context = as_context(data)

        if self._config.production:
            compiled = self._cache.get(page)
            if compiled is not None:
                logger.debug("Compiled template cache hit: %s", page)
                return HTMLResponse(await _invoke(compiled, context))

        source = await read_template(resolve_template_path(self._config.templates_root, page))
        compiled = await self._engine.compile(source, self._config.options)
        self._cache.set(page, compiled)
        logger.debug("Compiled template %s", page)
        return HTMLResponse(await _invoke(compiled, context))


class LoadedViewRenderer:
    """Renderer for load-then-render engines. The core cache is not used."""

    contract = EngineContract.LOAD

    def __init__(self, engine: ILoadEngine, config: ViewConfig) -> None:
        self._engine = engine
        self._config = config

    @property
    def config(self) -> ViewConfig:
        return self._config

    async def __call__(
        self,
        page: str,
        data: Any,
        render_options: Mapping[str, Any] | None = None,
    ) -> HTMLResponse | StreamingResponse:
        """Render ``page`` with ``data``; stream when ``render_options["stream"]`` is set.

        Streamed responses keep the host's default media type.
        """
        _check_input(page, data)
        context = as_context(data)

        template = await self._engine.load(page)

        if render_options and render_options.get("stream"):
            logger.debug("Streaming template %s", page)
            return StreamingResponse(template.stream(context))

        return HTMLResponse(await template.render_to_string(context))


ViewRenderer = CompiledViewRenderer | LoadedViewRenderer


def create_renderer(config: ViewConfig, cache: ITemplateCache | None = None) -> ViewRenderer:
    """Bind the renderer variant matching the configured engine."""
    engine = create_engine(config)
    if get_contract(config.engine_name) is LoadedViewRenderer.contract:
        if cache is not None:
            raise ConfigurationError(
                f"engine {config.engine_name} manages its own template cache, "
                "a compiled-template cache cannot be supplied"
            )
        return LoadedViewRenderer(engine, config)  # type: ignore[arg-type]
    return CompiledViewRenderer(engine, config, cache)  # type: ignore[arg-type]
