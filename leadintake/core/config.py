# leadintake/core/config.py
from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", validation_alias="ENVIRONMENT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # Server
    api_host: str = Field(default="0.0.0.0", validation_alias="API_HOST")
    api_port: int = Field(default=8000, validation_alias="API_PORT")
    api_prefix: str = Field(default="/api", validation_alias="API_PREFIX")

    # Redis (only used by the redis rate limit backend)
    redis_url: str = Field(default="redis://redis:6379/0", validation_alias="REDIS_URL")
    redis_max_connections: int = Field(default=20, validation_alias="REDIS_MAX_CONNECTIONS")
    redis_socket_timeout: int = Field(default=5, validation_alias="REDIS_SOCKET_TIMEOUT")
    redis_socket_connect_timeout: int = Field(default=5, validation_alias="REDIS_SOCKET_CONNECT_TIMEOUT")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: str = Field(default="json", validation_alias="LOG_FORMAT")

    # CORS
    allowed_origins: str = Field(default="http://localhost:3000,http://127.0.0.1:3000", validation_alias="ALLOWED_ORIGINS")
    allowed_methods: str = Field(default="GET,POST,OPTIONS", validation_alias="ALLOWED_METHODS")
    allowed_headers: str = Field(default="*", validation_alias="ALLOWED_HEADERS")

    # Lead rate limiting
    rate_limit_backend: str = Field(default="memory", validation_alias="RATE_LIMIT_BACKEND")
    lead_rate_limit_max: int = Field(default=5, validation_alias="LEAD_RATE_LIMIT_MAX")
    lead_rate_limit_window_seconds: int = Field(default=3600, validation_alias="LEAD_RATE_LIMIT_WINDOW_SECONDS")
    # Peers whose X-Forwarded-For is believed; empty means key on the socket peer only
    trusted_proxies: str = Field(default="", validation_alias="TRUSTED_PROXIES")

    # Email
    email_provider: str = Field(default="console", validation_alias="EMAIL_PROVIDER")
    resend_api_key: Optional[str] = Field(default=None, validation_alias="RESEND_API_KEY")
    resend_api_url: str = Field(default="https://api.resend.com", validation_alias="RESEND_API_URL")
    email_timeout_seconds: int = Field(default=10, validation_alias="EMAIL_TIMEOUT_SECONDS")
    lead_email_from: str = Field(
        default="Fredi Builders Website <leads@fredibuilders.co.uk>",
        validation_alias="LEAD_EMAIL_FROM",
    )
    lead_email_recipients: str = Field(
        default="fredibuilder18@icloud.com,info@fredibuilders.co.uk",
        validation_alias="LEAD_EMAIL_RECIPIENTS",
    )

    # Business
    business_name: str = Field(default="Fredi Builders", validation_alias="BUSINESS_NAME")
    business_phone: str = Field(default="07468 451511", validation_alias="BUSINESS_PHONE")

    # Photo uploads
    max_photo_size_mb: int = Field(default=5, validation_alias="MAX_PHOTO_SIZE_MB")
    allowed_photo_types: str = Field(default="image/jpeg,image/png,image/webp", validation_alias="ALLOWED_PHOTO_TYPES")
    max_photo_count: int = Field(default=10, ge=0, validation_alias="MAX_PHOTO_COUNT")

    # Monitoring
    sentry_dsn: Optional[str] = Field(default=None, validation_alias="SENTRY_DSN")

    @field_validator("environment")
    def validate_environment(cls, v):
        valid_envs = ["development", "testing", "staging", "production"]
        if v not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        valid_formats = ["json", "console"]
        if v not in valid_formats:
            raise ValueError(f"log_format must be one of {valid_formats}")
        return v

    @field_validator("email_provider")
    def validate_email_provider(cls, v):
        valid_providers = ["console", "resend"]
        if v not in valid_providers:
            raise ValueError(f"email_provider must be one of {valid_providers}")
        return v

    @field_validator("rate_limit_backend")
    def validate_rate_limit_backend(cls, v):
        valid_backends = ["memory", "redis"]
        if v not in valid_backends:
            raise ValueError(f"rate_limit_backend must be one of {valid_backends}")
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        return self.environment == "testing"

    @property
    def max_photo_size_bytes(self) -> int:
        return self.max_photo_size_mb * 1024 * 1024

    def origins(self) -> List[str]:
        if self.allowed_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    def methods(self) -> List[str]:
        return [method.strip() for method in self.allowed_methods.split(",") if method.strip()]

    def recipients(self) -> List[str]:
        return [address.strip() for address in self.lead_email_recipients.split(",") if address.strip()]

    def photo_types(self) -> List[str]:
        return [mime.strip().lower() for mime in self.allowed_photo_types.split(",") if mime.strip()]

    def proxies(self) -> List[str]:
        return [proxy.strip() for proxy in self.trusted_proxies.split(",") if proxy.strip()]


settings = Settings()
