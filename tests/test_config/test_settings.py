"""Testes das settings carregadas de variáveis de ambiente."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import (
    CacheSettings,
    NotionSettings,
    get_base_settings,
    get_cache_settings,
    get_notion_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_base_settings.cache_clear()
    get_cache_settings.cache_clear()
    get_notion_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_cache_settings.cache_clear()
    get_notion_settings.cache_clear()


class TestNotionSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("NOTION_API_KEY", "NOTION_DATABASE_ID", "NOTION_PAGE_SIZE"):
            monkeypatch.delenv(name, raising=False)

        settings = get_notion_settings()

        assert settings.is_configured is False
        assert settings.page_size == 100
        assert settings.api_version == "2022-06-28"
        assert settings.sort_property == "開催日（開始）"

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NOTION_API_KEY", "secret_abc")
        monkeypatch.setenv("NOTION_DATABASE_ID", "db-1")
        monkeypatch.setenv("NOTION_SORT_PROPERTY", "")

        settings = get_notion_settings()

        assert settings.is_configured is True
        assert settings.sort_property == ""
        assert settings.database_id == "db-1"

    def test_validate_reports_missing_credentials(self) -> None:
        errors = NotionSettings().validate()
        assert "NOTION_API_KEY não configurado" in errors
        assert "NOTION_DATABASE_ID não configurado" in errors

    def test_validate_rejects_page_size_above_limit(self) -> None:
        settings = NotionSettings(api_key="k", database_id="d", page_size=101)
        assert settings.validate() == ["NOTION_PAGE_SIZE deve estar entre 1 e 100"]

    def test_blank_values_are_not_configured(self) -> None:
        assert NotionSettings(api_key="  ", database_id="db").is_configured is False


class TestCacheSettings:
    def test_default_cache_control(self) -> None:
        assert CacheSettings().cache_control == "s-maxage=60, stale-while-revalidate=300"

    def test_cache_control_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CACHE_SHARED_MAX_AGE_SECONDS", "30")
        monkeypatch.setenv("CACHE_STALE_WHILE_REVALIDATE_SECONDS", "120")
        assert get_cache_settings().cache_control == "s-maxage=30, stale-while-revalidate=120"

    def test_negative_values_are_invalid(self) -> None:
        assert len(CacheSettings(-1, -1).validate()) == 2


class TestBaseSettings:
    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        assert get_base_settings().environment == "production"

    def test_log_level_is_uppercased(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_base_settings().log_level == "DEBUG"
