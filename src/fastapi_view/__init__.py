"""Engine-agnostic template views for FastAPI with a compiled-template cache."""

from __future__ import annotations

from .cache import DEFAULT_CAPACITY, CacheStats, LRUTemplateCache
from .config import RUNTIME_MODE_ENV, ViewConfig, is_production, validate_config
from .dispatcher import (
    CompiledViewRenderer,
    LoadedViewRenderer,
    ViewRenderer,
    create_renderer,
)
from .engines import SUPPORTED_ENGINES, EngineContract, create_engine
from .exceptions import ConfigurationError, InputError, ViewError
from .ports import ICompileEngine, ILoadedTemplate, ILoadEngine, ITemplateCache

__all__ = [
    "DEFAULT_CAPACITY",
    "RUNTIME_MODE_ENV",
    "SUPPORTED_ENGINES",
    "CacheStats",
    "CompiledViewRenderer",
    "ConfigurationError",
    "EngineContract",
    "ICompileEngine",
    "ILoadEngine",
    "ILoadedTemplate",
    "ITemplateCache",
    "InputError",
    "LRUTemplateCache",
    "LoadedViewRenderer",
    "ViewConfig",
    "ViewError",
    "ViewRenderer",
    "create_engine",
    "create_renderer",
    "is_production",
    "validate_config",
]
