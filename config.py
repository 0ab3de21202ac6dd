"""
Configuration management for Trello MCP Server.
Reads the Trello credentials from the environment (and a local .env file) once at startup.
"""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv


# Environment variable names
APP_KEY_VAR = "APP_KEY"
TOKEN_VAR = "TRELLO_TOKEN"
TIMEOUT_VAR = "TRELLO_TIMEOUT"
LOG_LEVEL_VAR = "LOG_LEVEL"

DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(ValueError):
    """Raised when the environment does not hold a usable configuration."""


@dataclass(frozen=True)
class Credentials:
    """Trello application key and user token."""
    app_key: str
    token: str

    def __repr__(self) -> str:
        return "Credentials(app_key='***', token='***')"


@dataclass(frozen=True)
class Settings:
    credentials: Credentials
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def _load_dotenv() -> None:
    """Load .env from the working directory. Real environment variables win."""
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)


def _parse_timeout(raw: str | None, errors: list[str]) -> float:
    if raw is None or raw.strip() == "":
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        errors.append(f"{TIMEOUT_VAR}: expected a number of seconds, got {raw!r}")
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        errors.append(f"{TIMEOUT_VAR}: must be greater than 0")
        return DEFAULT_TIMEOUT
    return timeout


def load_settings(environ: dict | None = None) -> Settings:
    """
    Build settings from the environment.

    Args:
        environ: Mapping to read instead of os.environ. When omitted, a .env
            file in the working directory is loaded first.

    Raises:
        ConfigError: If a required value is missing or a value is malformed.
            The message names every offending variable.
    """
    if environ is None:
        _load_dotenv()
        environ = os.environ

    errors = []

    app_key = environ.get(APP_KEY_VAR, "")
    if not app_key:
        errors.append(f"{APP_KEY_VAR}: must be a non-empty string")

    token = environ.get(TOKEN_VAR, "")
    if not token:
        errors.append(f"{TOKEN_VAR}: must be a non-empty string")

    timeout = _parse_timeout(environ.get(TIMEOUT_VAR), errors)

    log_level = (environ.get(LOG_LEVEL_VAR) or DEFAULT_LOG_LEVEL).upper()
    if log_level not in LOG_LEVELS:
        errors.append(f"{LOG_LEVEL_VAR}: expected one of {', '.join(LOG_LEVELS)}")

    if errors:
        raise ConfigError("Failed to load settings from environment: " + "; ".join(errors))

    return Settings(
        credentials=Credentials(app_key=app_key, token=token),
        timeout=timeout,
        log_level=log_level,
    )
