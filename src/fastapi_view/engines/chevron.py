"""Chevron (Mustache / Handlebars syntax) engine adapter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..ports import CompiledTemplate, Context

logger = logging.getLogger(__name__)

_DELIMITER_OPTIONS = ("def_ldel", "def_rdel")


class ChevronCompileEngine:
    """
    Compile-then-call adapter over ``chevron``.

    Compiling tokenizes the source once; rendering replays the tokens.
    Every option (``partials_path``, ``partials_dict``, ``warn``, ...) is
    passed to ``chevron.render``. ``def_ldel``/``def_rdel`` also apply to
    the up-front tokenize, and render needs them again for partials.
    """

    def __init__(self, module: Any) -> None:
        if not hasattr(module, "render") or not hasattr(module, "tokenizer"):
            raise ConfigurationError(
                "engine 'chevron' expects the chevron module (no render/tokenizer attribute)"
            )
        self._module = module

    async def compile(self, source: str, options: Mapping[str, Any]) -> CompiledTemplate:
        delimiters = {key: options[key] for key in _DELIMITER_OPTIONS if key in options}
        render_options = dict(options)
        try:
            tokens = list(self._module.tokenizer.tokenize(source, **delimiters))
        except Exception as e:
            logger.error("Chevron compilation failed: %s", e)
            raise

        def render(context: Context) -> str:
            return str(self._module.render(tokens, context, **render_options))

        return render
