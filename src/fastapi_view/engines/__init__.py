"""Template engine adapters."""

from __future__ import annotations

from .chevron import ChevronCompileEngine
from .jinja import JinjaCompileEngine, JinjaEnvironmentEngine, JinjaLoadedTemplate
from .registry import (
    SUPPORTED_ENGINES,
    EngineContract,
    EngineEntry,
    create_engine,
    get_contract,
)
from .string import StringTemplateEngine

__all__ = [
    "SUPPORTED_ENGINES",
    "ChevronCompileEngine",
    "EngineContract",
    "EngineEntry",
    "JinjaCompileEngine",
    "JinjaEnvironmentEngine",
    "JinjaLoadedTemplate",
    "StringTemplateEngine",
    "create_engine",
    "get_contract",
]
