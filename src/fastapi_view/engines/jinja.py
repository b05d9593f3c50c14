"""Jinja2 engine adapters.

Two flavours share this module:

- ``JinjaCompileEngine`` takes the ``jinja2`` module and compiles raw
  template source, leaving caching to the view cache.
- ``JinjaEnvironmentEngine`` takes a configured ``jinja2.Environment`` and
  loads templates through its loader. The environment keeps its own
  template cache and supports streaming through ``Template.generate``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import anyio.to_thread

from ..exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator, Mapping
    from pathlib import Path

    from ..ports import CompiledTemplate, Context

logger = logging.getLogger(__name__)


class JinjaCompileEngine:
    """Compile-then-call adapter. Options are ``Environment`` keyword arguments."""

    def __init__(self, module: Any) -> None:
        if not hasattr(module, "Environment"):
            raise ConfigurationError(
                "engine 'jinja2' expects the jinja2 module (no Environment attribute)"
            )
        self._module = module

    async def compile(self, source: str, options: Mapping[str, Any]) -> CompiledTemplate:
        environment = self._module.Environment(**options)
        try:
            template = environment.from_string(source)
        except Exception as e:
            logger.error("Jinja2 compilation failed: %s", e)
            raise

        if environment.is_async:
            return template.render_async  # type: ignore[no-any-return]
        return template.render  # type: ignore[no-any-return]


class JinjaLoadedTemplate:
    """A loaded Jinja2 template exposing buffered and streamed rendering."""

    def __init__(self, template: Any, *, is_async: bool, encoding: str = "utf-8") -> None:
        self._template = template
        self._is_async = is_async
        self._encoding = encoding

    @property
    def name(self) -> str | None:
        return self._template.name  # type: ignore[no-any-return]

    async def render_to_string(self, context: Context) -> str:
        try:
            if self._is_async:
                return await self._template.render_async(context)  # type: ignore[no-any-return]
            return self._template.render(context)  # type: ignore[no-any-return]
        except Exception as e:
            logger.error("Jinja2 rendering of %s failed: %s", self.name, e)
            raise

    def stream(self, context: Context) -> Iterator[bytes] | AsyncIterator[bytes]:
        if self._is_async:
            return self._encode_async(self._template.generate_async(context))
        return (chunk.encode(self._encoding) for chunk in self._template.generate(context))

    async def _encode_async(self, chunks: AsyncIterator[str]) -> AsyncIterator[bytes]:
        async for chunk in chunks:
            yield chunk.encode(self._encoding)


class JinjaEnvironmentEngine:
    """
    Load-then-render adapter over a ``jinja2.Environment``.

    An environment without a loader is overlaid with a ``FileSystemLoader``
    rooted at the templates directory, so template identifiers resolve the
    same way they do for compile-then-call engines.
    """

    def __init__(self, environment: Any, templates_root: Path) -> None:
        if not hasattr(environment, "get_template"):
            raise ConfigurationError(
                "engine 'jinja2_env' expects a jinja2.Environment (no get_template attribute)"
            )
        if environment.loader is None:
            try:
                from jinja2 import FileSystemLoader
            except ImportError as e:
                raise ConfigurationError(
                    "Jinja2 is required for engine 'jinja2_env'. "
                    "Install with: pip install 'fastapi-view[jinja2]'"
                ) from e
            environment = environment.overlay(loader=FileSystemLoader(str(templates_root)))
        self._environment = environment

    @property
    def environment(self) -> Any:
        return self._environment

    async def load(self, page: str) -> JinjaLoadedTemplate:
        # get_template may hit the filesystem on an environment cache miss
        template = await anyio.to_thread.run_sync(self._environment.get_template, page)
        return JinjaLoadedTemplate(template, is_async=self._environment.is_async)
