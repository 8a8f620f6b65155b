import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import dotenv_values

from errwrap.errors import ConfigurationError
from errwrap.wrapper.models import DEFAULT_JOINER, ErrorEnvelope, ErrorSource

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "errwrap"


class Settings:
    """
    Central configuration for errwrap.

    Reads environment variables at runtime when properties are accessed.
    Values from an optional dotenv file are used only when the process
    environment does not define the variable.
    """

    def __init__(self, file_values: Optional[Dict[str, Optional[str]]] = None) -> None:
        self._file_values: Dict[str, Optional[str]] = dict(file_values or {})
        self._default_joiner: Optional[str] = None
        self._log_level: Optional[str] = None

    def _lookup(self, name: str) -> Optional[str]:
        value = os.getenv(name)
        if value is not None:
            logger.debug("%s taken from the process environment", name)
            return value
        value = self._file_values.get(name)
        if value is not None:
            logger.debug("%s taken from the env file", name)
        return value

    @property
    def default_joiner(self) -> str:
        """
        Return the joiner substituted for a zero-value joiner, or raise a
        structured configuration error if the variable is not one character.
        """
        if self._default_joiner is None:
            raw = self._lookup("ERRWRAP_DEFAULT_JOINER")
            if raw is None or raw == "":
                raw = DEFAULT_JOINER
            if len(raw) != 1 or raw == "\0":
                raise ConfigurationError(
                    ErrorEnvelope(
                        code="CONFIG_INVALID_JOINER",
                        message=f"ERRWRAP_DEFAULT_JOINER must be a single non-NUL character, got {raw!r}.",
                        source=ErrorSource.CONFIG,
                        details={"value": raw},
                    )
                )
            self._default_joiner = raw
        return self._default_joiner

    @property
    def log_level(self) -> str:
        if self._log_level is None:
            raw = (self._lookup("ERRWRAP_LOG_LEVEL") or "WARNING").upper()
            # getLevelName maps known names to their numeric level.
            if not isinstance(logging.getLevelName(raw), int):
                raise ConfigurationError(
                    ErrorEnvelope(
                        code="CONFIG_INVALID_LOG_LEVEL",
                        message=f"ERRWRAP_LOG_LEVEL must be a logging level name, got {raw!r}.",
                        source=ErrorSource.CONFIG,
                        details={"value": raw},
                    )
                )
            self._log_level = raw
        return self._log_level


_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the singleton Settings instance (lazy initialization)."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def load_settings(env_file: Union[str, Path]) -> Settings:
    """Install and return a Settings instance backed by *env_file*."""
    global _settings_instance
    path = Path(env_file)
    logger.debug("Loading errwrap settings from %s (exists=%s)", path, path.exists())
    _settings_instance = Settings(dotenv_values(path))
    return _settings_instance


def reset_settings() -> None:
    global _settings_instance
    _settings_instance = None


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Set the level of the package logger; handlers are left to the application."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level if level is not None else get_settings().log_level)
    return package_logger


class _SettingsProxy:
    """Proxy that lazily initializes Settings on first access."""

    def __getattr__(self, name: str) -> Any:
        return getattr(get_settings(), name)


settings = _SettingsProxy()
