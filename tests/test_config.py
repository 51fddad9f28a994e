import pytest

from pymarkup.config import Settings, load_settings
from pymarkup.core import ConfigError

VARS = (
    "PYMARKUP_MAX_DEPTH",
    "PYMARKUP_TRACE",
    "PYMARKUP_HOST",
    "PYMARKUP_PORT",
    "PYMARKUP_LANG",
    "PYMARKUP_TITLE",
    "PYMARKUP_NO_SCRIPT",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # setenv first so monkeypatch restores whatever a .env file adds
    for name in VARS:
        monkeypatch.setenv(name, "x")
        monkeypatch.delenv(name)
    empty = tmp_path / "empty.env"
    empty.write_text("")
    return str(empty)


def test_defaults(clean_env):
    assert load_settings(clean_env) == Settings()


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("PYMARKUP_MAX_DEPTH", "32")
    monkeypatch.setenv("PYMARKUP_TRACE", "yes")
    monkeypatch.setenv("PYMARKUP_PORT", "9000")
    monkeypatch.setenv("PYMARKUP_LANG", "pt")
    settings = load_settings(clean_env)
    assert settings.max_depth == 32
    assert settings.trace is True
    assert settings.port == 9000
    assert settings.lang == "pt"
    assert settings.host == "127.0.0.1"


def test_env_file_is_loaded(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PYMARKUP_TITLE=From file\nPYMARKUP_TRACE=0\n")
    settings = load_settings(str(env_file))
    assert settings.title == "From file"
    assert settings.trace is False


def test_process_env_wins_over_env_file(clean_env, monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PYMARKUP_HOST=0.0.0.0\n")
    monkeypatch.setenv("PYMARKUP_HOST", "localhost")
    assert load_settings(str(env_file)).host == "localhost"


@pytest.mark.parametrize(
    "name,value",
    [
        ("PYMARKUP_MAX_DEPTH", "deep"),
        ("PYMARKUP_MAX_DEPTH", "0"),
        ("PYMARKUP_PORT", "80.5"),
        ("PYMARKUP_TRACE", "maybe"),
    ],
)
def test_invalid_values(clean_env, monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        load_settings(clean_env)
