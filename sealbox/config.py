"""
Configuration management for sealbox.

Settings are read from the environment on every call to load_config();
nothing is cached, so the library holds no process-wide state.

Environment variables:
- SEALBOX_DEFAULT_KEY_SIZE: key size used by generate_key() when none is given
- SEALBOX_LOG_LEVEL: level applied by configure_logging()
"""

import logging
import os
from typing import Mapping, Optional

from .crypto.aead import VALID_KEY_SIZES

DEFAULT_KEY_SIZE = 32
DEFAULT_LOG_LEVEL = "WARNING"


class ConfigError(Exception):
    """Raised when configuration values are invalid."""
    pass


class SealboxConfig:
    """
    Simple configuration holder for sealbox.
    """

    def __init__(self, default_key_size: int = DEFAULT_KEY_SIZE, log_level: str = DEFAULT_LOG_LEVEL):
        """
        Initialize configuration.

        Args:
            default_key_size: AES key size used when none is requested
            log_level: Logging level name for the sealbox logger

        Raises:
            ConfigError: If a value is invalid
        """
        if default_key_size not in VALID_KEY_SIZES:
            raise ConfigError(f"default_key_size must be one of {VALID_KEY_SIZES}, got {default_key_size}")

        level = str(log_level).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown log level: {log_level}")

        self.default_key_size = default_key_size
        self.log_level = level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'SealboxConfig':
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            SealboxConfig with defaults for unset variables

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        if environ is None:
            environ = os.environ

        return cls(
            default_key_size=default_key_size(environ),
            log_level=environ.get("SEALBOX_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    def __repr__(self) -> str:
        return f"SealboxConfig(default_key_size={self.default_key_size}, log_level={self.log_level!r})"


def default_key_size(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Read and validate SEALBOX_DEFAULT_KEY_SIZE only.

    Args:
        environ: Mapping to read instead of os.environ

    Returns:
        The configured key size, or DEFAULT_KEY_SIZE when unset

    Raises:
        ConfigError: If the variable is not a supported key size
    """
    if environ is None:
        environ = os.environ

    raw_size = environ.get("SEALBOX_DEFAULT_KEY_SIZE", str(DEFAULT_KEY_SIZE))
    try:
        key_size = int(raw_size)
    except ValueError:
        raise ConfigError(f"SEALBOX_DEFAULT_KEY_SIZE is not an integer: {raw_size!r}")

    if key_size not in VALID_KEY_SIZES:
        raise ConfigError(f"SEALBOX_DEFAULT_KEY_SIZE must be one of {VALID_KEY_SIZES}, got {key_size}")

    return key_size


def load_config() -> SealboxConfig:
    """Load a fresh configuration from the environment."""
    return SealboxConfig.from_env()


def configure_logging(config: Optional[SealboxConfig] = None) -> logging.Logger:
    """
    Attach a stream handler to the sealbox logger.

    Libraries stay silent by default; applications and scripts call this
    to see sealbox log output.

    Args:
        config: Configuration to use (loaded from the environment if None)

    Returns:
        The configured sealbox logger
    """
    if config is None:
        config = load_config()

    logger = logging.getLogger("sealbox")
    logger.setLevel(config.log_level)

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        logger.addHandler(handler)

    return logger
