"""Zero-dependency engine built on ``string.Template``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..ports import CompiledTemplate, Context

logger = logging.getLogger(__name__)


class StringTemplateEngine:
    """
    Compile-then-call adapter over the standard library ``string`` module.

    Templates use ``$name`` / ``${name}`` placeholders. With the ``safe``
    option unknown placeholders are left in place instead of raising.
    """

    def __init__(self, module: Any) -> None:
        template_cls = getattr(module, "Template", None)
        if template_cls is None:
            raise ConfigurationError(
                "engine 'string' expects the string module (no Template attribute)"
            )
        self._template_cls = template_cls

    async def compile(self, source: str, options: Mapping[str, Any]) -> CompiledTemplate:
        template = self._template_cls(source)
        safe = bool(options.get("safe", False))

        def render(context: Context) -> str:
            try:
                if safe:
                    return str(template.safe_substitute(context))
                return str(template.substitute(context))
            except KeyError as e:
                logger.error("Missing template variable: %s", e)
                raise

        return render
