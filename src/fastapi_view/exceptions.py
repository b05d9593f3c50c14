"""Exception hierarchy for fastapi-view.

Only configuration and input problems get their own types. Errors raised
while reading, compiling or rendering a template propagate unchanged so the
host's exception handling sees the original type and message.
"""

from __future__ import annotations


class ViewError(Exception):
    """Root exception for fastapi-view."""


class ConfigurationError(ViewError):
    """Raised at setup when the engine configuration is missing or invalid.

    Registration must fail: the application cannot serve views with this
    configuration.
    """


class InputError(ViewError, ValueError):
    """Raised per render call when the template name or data is missing."""

    def __init__(self, message: str = "missing data") -> None:
        super().__init__(message)
