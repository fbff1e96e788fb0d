"""Configuration models for the WordPress connection.

Settings load from keyword arguments, environment variables (``WP_`` prefix)
and ``.env`` files via pydantic-settings.
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetryConfig(BaseSettings):
    """Retry policy for read requests against the WordPress REST API.

    Writes are never retried.

    Attributes:
        max_attempts: Total attempts per request, including the first
        initial_wait: Minimum wait between attempts in seconds
        max_wait: Maximum wait between attempts in seconds
        exponential_base: Multiplier for exponential backoff
    """

    model_config = SettingsConfigDict(
        env_prefix="WP_RETRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_attempts: int = Field(default=3, ge=1, le=10)
    initial_wait: float = Field(default=1.0, ge=0.1, le=60.0)
    max_wait: float = Field(default=30.0, ge=1.0, le=300.0)
    exponential_base: float = Field(default=2.0, ge=1.0, le=10.0)


class WordPressConfig(BaseSettings):
    """Connection settings for a WordPress site.

    Authentication uses a WordPress application password, so the account
    needs the capability to edit every exported content type.

    Example:
        >>> config = WordPressConfig(
        ...     base_url="https://staging.example.com",
        ...     username="admin",
        ...     application_password="abcd efgh ijkl mnop",
        ... )
    """

    model_config = SettingsConfigDict(
        env_prefix="WP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(description="Site root URL, without /wp-json")
    username: str = Field(description="WordPress user login")
    application_password: SecretStr = Field(description="Application password for the user")
    timeout: float = Field(default=30.0, gt=0, le=600.0)
    max_connections: int = Field(default=10, ge=1, le=100)
    verify_ssl: bool = True
    page_size: int = Field(default=100, ge=1, le=100)
    retry: RetryConfig = Field(default_factory=RetryConfig)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("base_url cannot be empty")
        return value

    def get_base_url(self) -> str:
        """Return the site root URL."""
        return self.base_url

    def get_username(self) -> str:
        """Return the WordPress user login."""
        return self.username

    def get_application_password(self) -> str:
        """Return the application password as plain text."""
        return self.application_password.get_secret_value()
