"""Supported engine identifiers and the adapter factory for each."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..exceptions import ConfigurationError
from .chevron import ChevronCompileEngine
from .jinja import JinjaCompileEngine, JinjaEnvironmentEngine
from .string import StringTemplateEngine

if TYPE_CHECKING:
    from ..config import ViewConfig
    from ..ports import ICompileEngine, ILoadEngine

logger = logging.getLogger(__name__)


class EngineContract(str, Enum):
    """How the dispatcher talks to an engine."""

    COMPILE = "compile"
    LOAD = "load"


@dataclass(frozen=True)
class EngineEntry:
    name: str
    contract: EngineContract
    factory: Callable[[Any, Path], Any]


_ENGINES: dict[str, EngineEntry] = {
    entry.name: entry
    for entry in (
        EngineEntry(
            "string",
            EngineContract.COMPILE,
            lambda instance, _root: StringTemplateEngine(instance),
        ),
        EngineEntry(
            "jinja2",
            EngineContract.COMPILE,
            lambda instance, _root: JinjaCompileEngine(instance),
        ),
        EngineEntry(
            "chevron",
            EngineContract.COMPILE,
            lambda instance, _root: ChevronCompileEngine(instance),
        ),
        EngineEntry(
            "jinja2_env",
            EngineContract.LOAD,
            JinjaEnvironmentEngine,
        ),
    )
}

SUPPORTED_ENGINES: tuple[str, ...] = tuple(_ENGINES)


def get_contract(name: str) -> EngineContract:
    """Return the contract of a supported engine identifier."""
    try:
        return _ENGINES[name].contract
    except KeyError:
        raise ConfigurationError(f"unsupported engine: {name}") from None


def create_engine(config: ViewConfig) -> ICompileEngine | ILoadEngine:
    """Build the adapter for the configured engine.

    Raises:
        ConfigurationError: If the identifier is unknown or the instance
            lacks what the adapter needs.
    """
    entry = _ENGINES.get(config.engine_name)
    if entry is None:
        raise ConfigurationError(f"unsupported engine: {config.engine_name}")
    engine = entry.factory(config.engine, config.templates_root)
    logger.debug("Created %s adapter for engine %s", entry.contract.value, entry.name)
    return engine  # type: ignore[no-any-return]
