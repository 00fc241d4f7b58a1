"""Unit tests for the showcase-api CLI."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from showcase_api.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.delenv("CACHE_URL", raising=False)


class TestServe:
    """Tests for the serve command."""

    def test_runs_app_factory(self) -> None:
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--port", "9000"])
        assert result.exit_code == 0
        args, kwargs = mock_run.call_args
        assert args[0] == "showcase_api.main:create_app"
        assert kwargs["factory"] is True
        assert kwargs["port"] == 9000


class TestSeed:
    """Tests for the seed command."""

    def test_seeds_all_sections(self) -> None:
        mock_seed = AsyncMock(return_value={"principles": 3, "team": 11, "awards": 4})
        with patch("showcase_api.services.seed_service.seed_content", mock_seed):
            result = runner.invoke(app, ["seed"])
        assert result.exit_code == 0
        assert "team: 11 created" in result.output
        assert mock_seed.await_args.kwargs["sections"] == ("principles", "team", "awards")
        assert mock_seed.await_args.kwargs["fresh"] is False

    def test_only_and_fresh(self) -> None:
        mock_seed = AsyncMock(return_value={"awards": 4})
        with patch("showcase_api.services.seed_service.seed_content", mock_seed):
            result = runner.invoke(app, ["seed", "--only", "awards", "--fresh"])
        assert result.exit_code == 0
        assert mock_seed.await_args.kwargs["sections"] == ("awards",)
        assert mock_seed.await_args.kwargs["fresh"] is True

    def test_rejects_unknown_section(self) -> None:
        result = runner.invoke(app, ["seed", "--only", "voters"])
        assert result.exit_code != 0


class TestCacheClear:
    """Tests for the cache clear command."""

    def test_clears_configured_backend(self) -> None:
        backend = MagicMock()
        backend.clear = AsyncMock()
        with (
            patch("showcase_api.core.cache.init_cache", return_value=backend),
            patch("showcase_api.core.cache.dispose_cache", new_callable=AsyncMock) as mock_dispose,
        ):
            result = runner.invoke(app, ["cache", "clear"])
        assert result.exit_code == 0
        assert "Cache cleared" in result.output
        backend.clear.assert_awaited_once()
        mock_dispose.assert_awaited_once()


class TestDb:
    """Tests for the db command group."""

    def test_upgrade_uses_settings_url(self) -> None:
        with (
            patch("alembic.command.upgrade") as mock_upgrade,
            patch("alembic.config.Config") as mock_config,
        ):
            result = runner.invoke(app, ["db", "upgrade"])
        assert result.exit_code == 0
        mock_config.return_value.set_main_option.assert_called_once_with(
            "sqlalchemy.url", "sqlite+aiosqlite:///:memory:"
        )
        assert mock_upgrade.call_args.args[1] == "head"
