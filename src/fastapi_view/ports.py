"""Protocols for the cache and the two engine contracts."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

Context = Mapping[str, Any]
CompiledTemplate = Callable[[Context], str | Awaitable[str]]


@runtime_checkable
class ITemplateCache(Protocol):
    """Bounded store of compiled templates keyed by template identifier."""

    def get(self, key: str) -> CompiledTemplate | None:
        """Return the compiled template for ``key`` or None. A hit counts as a use."""
        ...

    def set(self, key: str, value: CompiledTemplate) -> None:
        """Store ``value`` under ``key``, evicting the least recently used entry if full."""
        ...


@runtime_checkable
class ICompileEngine(Protocol):
    """Compile-then-call engine: template source in, reusable render function out."""

    async def compile(self, source: str, options: Mapping[str, Any]) -> CompiledTemplate:
        ...


@runtime_checkable
class ILoadedTemplate(Protocol):
    """Template object returned by a load-then-render engine."""

    async def render_to_string(self, context: Context) -> str:
        ...

    def stream(self, context: Context) -> Iterator[bytes] | AsyncIterator[bytes]:
        ...


@runtime_checkable
class ILoadEngine(Protocol):
    """Load-then-render engine. The engine owns lookup and caching of templates."""

    async def load(self, page: str) -> ILoadedTemplate:
        ...
