"""Test configuration and fixtures."""

from __future__ import annotations

import string
from pathlib import Path
from typing import Any

import pytest

from fastapi_view.config import ViewConfig

FIXTURE_TEMPLATES = Path(__file__).parent / "fixtures" / "templates"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: end-to-end tests through a FastAPI application",
    )


class CountingEngine:
    """Compile-then-call engine that records every compile and render."""

    def __init__(self) -> None:
        self.compiled: list[str] = []
        self.renders = 0

    async def compile(self, source: str, options: Any) -> Any:
        self.compiled.append(source)

        def render(context: Any) -> str:
            self.renders += 1
            return source.format(**context)

        return render


@pytest.fixture
def templates_dir() -> Path:
    """Directory with the static fixture templates."""
    return FIXTURE_TEMPLATES


@pytest.fixture
def counting_engine() -> CountingEngine:
    return CountingEngine()


@pytest.fixture
def tmp_templates(tmp_path: Path) -> Path:
    """Writable templates directory with a single ``index.tpl``."""
    (tmp_path / "index.tpl").write_text("Hello, {name}", encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_config(tmp_templates: Path):
    """Factory for ViewConfig objects rooted at ``tmp_templates``."""

    def factory(**overrides: Any) -> ViewConfig:
        values: dict[str, Any] = {
            "engine_name": "string",
            "engine": string,
            "templates_root": tmp_templates,
            "max_cache": 100,
            "production": True,
        }
        values.update(overrides)
        return ViewConfig(**values)

    return factory
