"""Configuration management for the payment hand-off layer."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthorizerSettings(BaseSettings):
    """Authorization flow selection settings."""

    name: str = Field(
        default="presentation",
        description="Registered authorizer used when none is requested explicitly",
    )
    mock_default_response: str = Field(
        default="completed",
        description="Outcome of the mock authorizer for unscripted references",
    )
    mock_latency_ms: int = Field(default=0, description="Simulated mock authorizer latency")

    model_config = SettingsConfigDict(env_prefix="AUTHORIZER_")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Root log level")

    # Request defaults applied by the normalizer
    default_currency: str = Field(
        default="NGN",
        description="Currency used when a request does not carry one",
    )
    default_callback_url: str = Field(
        default="https://example.com/api/payment/callback",
        description="Callback URL handed to the authorization flow when the caller omits one",
    )

    # Authorizer selection
    authorizer: AuthorizerSettings = Field(default_factory=AuthorizerSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
    )


# Global settings instance
settings = Settings()
