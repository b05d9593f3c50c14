"""Tests for setup-time configuration validation."""

from __future__ import annotations

import string
from pathlib import Path

import pytest

from fastapi_view.config import RUNTIME_MODE_ENV, is_production, validate_config
from fastapi_view.exceptions import ConfigurationError, ViewError


class TestValidateConfig:
    def test_missing_engine(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(None)
        assert str(exc_info.value) == "missing engine"

    def test_empty_engine_mapping_is_missing(self) -> None:
        with pytest.raises(ConfigurationError, match="missing engine"):
            validate_config({})

    def test_unsupported_engine_is_named(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config({"foo": object()})
        assert "foo" in str(exc_info.value)
        assert str(exc_info.value) == "unsupported engine: foo"

    def test_only_first_key_is_inspected(self) -> None:
        config = validate_config({"string": string, "foo": object()})
        assert config.engine_name == "string"

        with pytest.raises(ConfigurationError, match="notSupported"):
            validate_config({"notSupported": None, "string": string})

    def test_configuration_error_is_view_error(self) -> None:
        assert issubclass(ConfigurationError, ViewError)

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv(RUNTIME_MODE_ENV, raising=False)

        config = validate_config({"string": string})

        assert config.engine is string
        assert dict(config.options) == {}
        assert config.templates_root == Path.cwd()
        assert config.max_cache == 100
        assert config.production is False

    def test_options_are_copied_and_read_only(self) -> None:
        options = {"safe": True}
        config = validate_config({"string": string}, options=options)
        options["safe"] = False

        assert config.options["safe"] is True
        with pytest.raises(TypeError):
            config.options["safe"] = False  # type: ignore[index]

    def test_relative_templates_resolve_against_cwd(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.chdir(tmp_path)
        config = validate_config({"string": string}, templates="views")
        assert config.templates_root == Path.cwd() / "views"

    def test_absolute_templates_are_kept(self, tmp_path: Path) -> None:
        config = validate_config({"string": string}, templates=tmp_path)
        assert config.templates_root == tmp_path

    @pytest.mark.parametrize("max_cache", [0, -1, 1.5, "10", True])
    def test_rejects_invalid_max_cache(self, max_cache: object) -> None:
        with pytest.raises(ConfigurationError, match="max_cache"):
            validate_config({"string": string}, max_cache=max_cache)  # type: ignore[arg-type]

    def test_custom_max_cache(self) -> None:
        assert validate_config({"string": string}, max_cache=5).max_cache == 5

    def test_production_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(RUNTIME_MODE_ENV, "production")
        assert validate_config({"string": string}).production is True

    def test_explicit_production_overrides_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(RUNTIME_MODE_ENV, "production")
        assert validate_config({"string": string}, production=False).production is False


class TestIsProduction:
    @pytest.mark.parametrize(
        ("environ", "expected"),
        [
            ({"APP_ENV": "production"}, True),
            ({"APP_ENV": "development"}, False),
            ({"APP_ENV": "Production"}, False),
            ({}, False),
        ],
    )
    def test_reads_app_env(self, environ: dict[str, str], expected: bool) -> None:
        assert is_production(environ) is expected
