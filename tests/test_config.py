"""Tests de configuración por variables de entorno.

Ejecutar:
    pytest tests/test_config.py -v
"""

import pytest

from isens_coop.common.config import Settings, get_settings

ENV_VARS = (
    "ISENS_ARCHIVE_PATH",
    "ISENS_TICK_SECONDS",
    "ISENS_WINDOW_CAPACITY",
    "ISENS_ACTIVITY_SEED",
    "ISENS_HOST",
    "ISENS_PORT",
    "ISENS_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Entorno sin variables ISENS_* y sin archivo .env."""
    for name in ENV_VARS:
        # setenv + delenv para que monkeypatch restaure también lo que cargue dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("ISENS_ENV_FILE", str(tmp_path / "missing.env"))
    return monkeypatch


class TestGetSettings:
    """Lectura de Settings con defaults y overrides."""

    def test_defaults(self, clean_env):
        assert get_settings() == Settings()

    def test_defaults_values(self):
        settings = Settings()

        assert settings.tick_seconds == 2.0
        assert settings.window_capacity == 6
        assert settings.activity_seed is None

    def test_env_overrides(self, clean_env):
        clean_env.setenv("ISENS_ARCHIVE_PATH", "/data/house1.csv")
        clean_env.setenv("ISENS_TICK_SECONDS", "0.5")
        clean_env.setenv("ISENS_WINDOW_CAPACITY", "10")
        clean_env.setenv("ISENS_ACTIVITY_SEED", "7")
        clean_env.setenv("ISENS_PORT", "9000")
        clean_env.setenv("ISENS_LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.archive_path == "/data/house1.csv"
        assert settings.tick_seconds == 0.5
        assert settings.window_capacity == 10
        assert settings.activity_seed == 7
        assert settings.port == 9000
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "name, value, attr, expected",
        [
            ("ISENS_TICK_SECONDS", "abc", "tick_seconds", 2.0),
            ("ISENS_TICK_SECONDS", "0", "tick_seconds", 2.0),
            ("ISENS_TICK_SECONDS", "-1", "tick_seconds", 2.0),
            ("ISENS_WINDOW_CAPACITY", "0", "window_capacity", 6),
            ("ISENS_WINDOW_CAPACITY", "six", "window_capacity", 6),
            ("ISENS_PORT", "http", "port", 8000),
            ("ISENS_ACTIVITY_SEED", "", "activity_seed", None),
        ],
    )
    def test_invalid_values_fall_back(self, clean_env, name, value, attr, expected):
        clean_env.setenv(name, value)
        assert getattr(get_settings(), attr) == expected

    def test_env_file_is_loaded(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("ISENS_TICK_SECONDS=1.5\nISENS_HOST=0.0.0.0\n", encoding="utf-8")
        clean_env.setenv("ISENS_ENV_FILE", str(env_file))

        settings = get_settings()

        assert settings.tick_seconds == 1.5
        assert settings.host == "0.0.0.0"

    def test_real_env_wins_over_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("ISENS_TICK_SECONDS=1.5\n", encoding="utf-8")
        clean_env.setenv("ISENS_ENV_FILE", str(env_file))
        clean_env.setenv("ISENS_TICK_SECONDS", "3")

        assert get_settings().tick_seconds == 3.0
