"""View configuration and its setup-time validation."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .cache import DEFAULT_CAPACITY
from .engines.registry import SUPPORTED_ENGINES
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

RUNTIME_MODE_ENV = "APP_ENV"
PRODUCTION = "production"


def is_production(environ: Mapping[str, str] | None = None) -> bool:
    """Whether ``APP_ENV`` selects production mode."""
    environ = os.environ if environ is None else environ
    return environ.get(RUNTIME_MODE_ENV) == PRODUCTION


@dataclass(frozen=True)
class ViewConfig:
    """Validated, immutable view configuration.

    Attributes:
        engine_name: Identifier of the selected engine.
        engine: The engine instance (module or environment object).
        options: Passed verbatim to every compile call.
        templates_root: Directory template identifiers are resolved against.
        max_cache: Capacity of the compiled-template cache.
        production: Whether cached compiled templates may be served.
    """

    engine_name: str
    engine: Any
    options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    templates_root: Path = field(default_factory=Path.cwd)
    max_cache: int = DEFAULT_CAPACITY
    production: bool = False


def validate_config(
    engine: Mapping[str, Any] | None,
    *,
    options: Mapping[str, Any] | None = None,
    templates: str | os.PathLike[str] | None = None,
    max_cache: int | None = None,
    production: bool | None = None,
) -> ViewConfig:
    """Validate plugin options and resolve defaults.

    Args:
        engine: Mapping with exactly one key, the engine identifier, whose
            value is the engine instance. Only the first key is inspected.
        options: Engine options, defaults to empty.
        templates: Templates directory. Relative paths resolve against the
            working directory, which is also the default.
        max_cache: Compiled-template cache capacity, defaults to 100.
        production: Runtime mode. Read from ``APP_ENV`` when None.

    Returns:
        The resolved ViewConfig.

    Raises:
        ConfigurationError: If no engine is given, the engine is not
            supported, or ``max_cache`` is not a positive integer.
    """
    if not engine:
        raise ConfigurationError("missing engine")

    name = next(iter(engine))
    if name not in SUPPORTED_ENGINES:
        raise ConfigurationError(f"unsupported engine: {name}")

    if max_cache is None:
        max_cache = DEFAULT_CAPACITY
    elif isinstance(max_cache, bool) or not isinstance(max_cache, int) or max_cache <= 0:
        raise ConfigurationError(f"max_cache must be a positive integer, got {max_cache!r}")

    config = ViewConfig(
        engine_name=name,
        engine=engine[name],
        options=MappingProxyType(dict(options or {})),
        templates_root=Path.cwd() / (templates or ""),
        max_cache=max_cache,
        production=is_production() if production is None else production,
    )
    logger.info(
        "View engine %s configured (templates=%s, max_cache=%d, production=%s)",
        config.engine_name,
        config.templates_root,
        config.max_cache,
        config.production,
    )
    return config
