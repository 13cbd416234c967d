from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_REQUEST_TIMEOUT = 15.0
DEFAULT_WINDOW_DAYS = 30


@dataclass
class Settings:
    logo_path: Path | None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    default_window_days: int = DEFAULT_WINDOW_DAYS


def _read_env_file() -> dict[str, str]:
    """Load minimal .env to support SMR_* keys if not in the environment.

    We intentionally do not overwrite existing os.environ values.
    """
    env_path = Path.cwd() / ".env"
    env: dict[str, str] = {}
    if not env_path.exists():
        return env
    try:
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            env[k] = v
    except (OSError, UnicodeDecodeError) as e:
        # A broken .env must not break CLI usage
        logger.warning(f"Ignoring unreadable .env file: {e}")
        return {}
    return env


def _get_env(
    name: str,
    fallback_names: list[str] | None = None,
    env_file: dict[str, str] | None = None,
) -> str | None:
    # Priority: process env -> .env -> fallback names
    val = os.getenv(name)
    if val:
        return val
    if env_file and name in env_file:
        return env_file[name]
    if fallback_names:
        for fb in fallback_names:
            v = os.getenv(fb)
            if v:
                return v
            if env_file and fb in env_file:
                return env_file[fb]
    return None


def _as_float(raw: str | None, name: str, default: float) -> float:
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}; using {default}")
        return default


def _as_int(raw: str | None, name: str, default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}; using {default}")
        return default


def get_settings() -> Settings:
    env_file = _read_env_file()
    # Support SMR_* prefixed variables with non-prefixed fallbacks
    logo = _get_env("SMR_LOGO_PATH", ["LOGO_PATH"], env_file)
    timeout = _get_env("SMR_REQUEST_TIMEOUT", ["REQUEST_TIMEOUT"], env_file)
    window = _get_env("SMR_DEFAULT_WINDOW_DAYS", None, env_file)
    return Settings(
        logo_path=Path(logo) if logo else None,
        request_timeout=_as_float(timeout, "SMR_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
        default_window_days=max(
            1, _as_int(window, "SMR_DEFAULT_WINDOW_DAYS", DEFAULT_WINDOW_DAYS)
        ),
    )
