"""Configuration factory for building WordPressConfig instances.

Supports layered configuration: explicit values, ``.env`` files and
environment variables, with helpers to merge several sources.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigurationError
from .models.config import RetryConfig, WordPressConfig

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_PATHS = (".env", ".env.local", "~/.config/wp-meta-kit/.env")


class ConfigFactory:
    """Factory methods for WordPressConfig.

    Example:
        >>> config = ConfigFactory.from_env_file(".env.production", required=True)
        >>> config = ConfigFactory.create(
        ...     base_url="https://example.com",
        ...     username="admin",
        ...     application_password="xxxx xxxx xxxx xxxx",
        ... )
    """

    @staticmethod
    def create(**kwargs: Any) -> WordPressConfig:
        """Create a config from explicit values, ignoring ``.env`` files.

        Environment variables still fill in any value not given here.

        Raises:
            ConfigurationError: If the values do not validate
        """
        return ConfigFactory._build(_env_file=None, **kwargs)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> WordPressConfig:
        """Create a config from a dictionary (e.g., parsed YAML or JSON)."""
        return ConfigFactory.create(**data)

    @staticmethod
    def from_environment_only(**overrides: Any) -> WordPressConfig:
        """Create a config from ``WP_*`` environment variables only.

        Keyword arguments override the environment.
        """
        return ConfigFactory._build(_env_file=None, **overrides)

    @staticmethod
    def from_env_file(
        env_file: str | Path, *, required: bool = False, **overrides: Any
    ) -> WordPressConfig:
        """Create a config from a specific ``.env`` file.

        Args:
            env_file: Path to the ``.env`` file
            required: Raise if the file does not exist instead of falling
                back to environment variables

        Raises:
            ConfigurationError: If the file is required but missing, or the
                resulting values do not validate
        """
        path = Path(env_file).expanduser()
        if not path.is_file():
            if required:
                raise ConfigurationError(f".env file not found: {path}")
            logger.debug(f"{path} not found, using environment variables only")
            return ConfigFactory.from_environment_only(**overrides)

        logger.debug(f"Loading configuration from {path}")
        try:
            retry = RetryConfig(_env_file=path)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
        return ConfigFactory._build(_env_file=path, retry=retry, **overrides)

    @staticmethod
    def from_env(
        search_paths: list[str] | None = None,
        *,
        required: bool = False,
        **overrides: Any,
    ) -> WordPressConfig:
        """Load from the first ``.env`` file found in ``search_paths``.

        Raises:
            ConfigurationError: If ``required`` and no file is found
        """
        paths = search_paths if search_paths is not None else list(DEFAULT_SEARCH_PATHS)

        for candidate in paths:
            path = Path(candidate).expanduser()
            if path.is_file():
                return ConfigFactory.from_env_file(path, required=True, **overrides)

        if required:
            raise ConfigurationError(f"No .env file found in: {', '.join(paths)}")

        return ConfigFactory.from_environment_only(**overrides)

    @staticmethod
    def merge(*configs: WordPressConfig, base: WordPressConfig | None = None) -> WordPressConfig:
        """Merge configs; explicitly set values in later configs win.

        Raises:
            ValueError: If no config is given
        """
        if not configs and base is None:
            raise ValueError("At least one config must be provided to merge")

        layers = ([base] if base is not None else []) + list(configs)
        merged: dict[str, Any] = layers[0].model_dump()
        merged["retry"] = layers[0].retry

        for layer in layers[1:]:
            for name in layer.model_fields_set:
                merged[name] = getattr(layer, name)

        return ConfigFactory._build(_env_file=None, **merged)

    @staticmethod
    def _build(**kwargs: Any) -> WordPressConfig:
        try:
            return WordPressConfig(**kwargs)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(
    env_file: str | Path | None = None, *, required: bool = False, **overrides: Any
) -> WordPressConfig:
    """Load configuration from a file, or search the default locations.

    Keyword arguments take precedence over both files and environment.
    """
    if env_file is not None:
        return ConfigFactory.from_env_file(env_file, required=required, **overrides)
    return ConfigFactory.from_env(required=required, **overrides)


def create_config(**kwargs: Any) -> WordPressConfig:
    """Shortcut for ConfigFactory.create."""
    return ConfigFactory.create(**kwargs)
