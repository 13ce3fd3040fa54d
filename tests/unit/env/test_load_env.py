"""
Tests for Env and load_env.
"""

import pytest
from pydantic import ValidationError

from netcoords.env import Env, load_env
from netcoords.models import VivaldiConfig


@pytest.fixture
def missing_env_file(tmp_path) -> str:
    return str(tmp_path / "missing.env")


@pytest.fixture(autouse=True)
def clear_netcoords_environment(monkeypatch):
    for envar_name in Env.types_map():
        monkeypatch.delenv(envar_name, raising=False)


class TestLoadEnv:
    """Layering of environment variables, .env files and overrides."""

    def test_defaults(self, missing_env_file) -> None:
        env = load_env(Env, env_file=missing_env_file)

        assert env == Env()
        assert env.get_vivaldi_config() == VivaldiConfig()
        assert env.get_node_options() == {"dimensions": 8, "window_size": 0}
        assert env.get_logging_options() == {
            "log_level": "info",
            "log_output": "stdout",
        }

    def test_environment_variables(self, monkeypatch, missing_env_file) -> None:
        monkeypatch.setenv("NETCOORDS_CE", "0.5")
        monkeypatch.setenv("NETCOORDS_DIMENSIONS", "3")

        env = load_env(Env, env_file=missing_env_file)

        assert env.NETCOORDS_CE == 0.5
        assert env.NETCOORDS_DIMENSIONS == 3
        assert env.get_vivaldi_config().ce == 0.5

    def test_env_file_overrides_environment(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("NETCOORDS_GRAVITY_RHO", "200.0")
        env_file = tmp_path / ".env"
        env_file.write_text(
            "NETCOORDS_GRAVITY_RHO=300.0\n"
            "NETCOORDS_WINDOW_SIZE=16\n"
            "NETCOORDS_LOG_OUTPUT=stderr\n"
            "UNRELATED=1\n"
        )

        env = load_env(Env, env_file=str(env_file))

        assert env.NETCOORDS_GRAVITY_RHO == 300.0
        assert env.NETCOORDS_WINDOW_SIZE == 16
        assert env.NETCOORDS_LOG_OUTPUT == "stderr"

    def test_override_wins(self, monkeypatch, missing_env_file) -> None:
        monkeypatch.setenv("NETCOORDS_ERROR_MAX", "2.0")

        env = load_env(
            Env,
            env_file=missing_env_file,
            override=Env(NETCOORDS_ERROR_MAX=3.0),
        )

        assert env.NETCOORDS_ERROR_MAX == 3.0

    def test_override_keeps_unset_fields_from_environment(
        self,
        monkeypatch,
        tmp_path,
    ) -> None:
        """Fields left unset on the override do not reset loaded values."""
        monkeypatch.setenv("NETCOORDS_CE", "0.5")
        env_file = tmp_path / ".env"
        env_file.write_text("NETCOORDS_WINDOW_SIZE=16\n")

        env = load_env(
            Env,
            env_file=str(env_file),
            override=Env(NETCOORDS_ERROR_MAX=3.0),
        )

        assert env.NETCOORDS_ERROR_MAX == 3.0
        assert env.NETCOORDS_CE == 0.5
        assert env.NETCOORDS_WINDOW_SIZE == 16

    def test_invalid_tuning_rejected(self, monkeypatch, missing_env_file) -> None:
        monkeypatch.setenv("NETCOORDS_CC", "1.5")

        env = load_env(Env, env_file=missing_env_file)

        with pytest.raises(ValidationError):
            env.get_vivaldi_config()

    def test_invalid_number_rejected(self, monkeypatch, missing_env_file) -> None:
        monkeypatch.setenv("NETCOORDS_DIMENSIONS", "eight")

        with pytest.raises(ValueError):
            load_env(Env, env_file=missing_env_file)
