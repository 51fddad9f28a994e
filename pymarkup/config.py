import os
from dataclasses import dataclass
from typing import Optional

import dotenv

from pymarkup.core.errors import ConfigError
from pymarkup.core.resolver import DEFAULT_MAX_DEPTH

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


@dataclass
class Settings:
    max_depth: int = DEFAULT_MAX_DEPTH
    trace: bool = False
    host: str = "127.0.0.1"
    port: int = 8000
    lang: str = "en"
    title: str = "Rendered as dynamic markup"
    no_script: str = "Your browser does not support JavaScript!"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Build Settings from ``PYMARKUP_*`` environment variables.

    A ``.env`` file (or ``env_file``) is loaded first; variables already set in
    the environment win.
    """
    dotenv.load_dotenv(env_file)
    defaults = Settings()
    settings = Settings(
        max_depth=_env_int("PYMARKUP_MAX_DEPTH", defaults.max_depth),
        trace=_env_bool("PYMARKUP_TRACE", defaults.trace),
        host=os.getenv("PYMARKUP_HOST", defaults.host),
        port=_env_int("PYMARKUP_PORT", defaults.port),
        lang=os.getenv("PYMARKUP_LANG", defaults.lang),
        title=os.getenv("PYMARKUP_TITLE", defaults.title),
        no_script=os.getenv("PYMARKUP_NO_SCRIPT", defaults.no_script),
    )
    if settings.max_depth < 1:
        raise ConfigError(f"PYMARKUP_MAX_DEPTH must be >= 1, got {settings.max_depth}")
    return settings
