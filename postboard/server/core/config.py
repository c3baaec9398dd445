"""
Configuration Settings.

This module defines the unified application configuration using Pydantic's BaseSettings.
Every environment variable the service consumes is declared here once and validated at
load time; the rest of the code base reads ``settings`` instead of the process environment.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENTS = ("development", "test", "staging", "production")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", alias="POSTBOARD_SERVER_HOST", description="Host address to bind to")
    port: int = Field(default=8000, alias="PORT", description="Port number to listen on")
    environment: str = Field(default="development", alias="ENVIRONMENT", description="Deployment environment name")

    model_config = {"populate_by_name": True}


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    url: str = Field(
        default="sqlite+aiosqlite:///./postboard.db",
        alias="DATABASE_URL",
        description="Async SQLAlchemy connection URL",
    )
    echo: bool = Field(default=False, alias="DATABASE_ECHO", description="Echo emitted SQL statements")

    model_config = {"populate_by_name": True}

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class EmailConfig(BaseModel):
    """Outbound e-mail (SendGrid) configuration."""

    api_key: Optional[str] = Field(default=None, alias="SENDGRID_API_KEY", description="SendGrid API key")
    sender: str = Field(default="no-reply@postboard.local", alias="EMAIL_FROM", description="From address")
    base_url: str = Field(
        default="https://api.sendgrid.com", alias="SENDGRID_BASE_URL", description="SendGrid API base URL"
    )
    timeout_seconds: float = Field(default=10.0, alias="EMAIL_TIMEOUT_SECONDS", description="HTTP timeout")

    model_config = {"populate_by_name": True}

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)


class TelemetryConfig(BaseModel):
    """Logfire error telemetry configuration."""

    token: Optional[str] = Field(default=None, alias="LOGFIRE_TOKEN", description="Logfire write token")
    service_name: str = Field(default="postboard", alias="LOGFIRE_SERVICE_NAME", description="Reported service name")
    service_version: str = Field(default="0.1.0", alias="LOGFIRE_SERVICE_VERSION", description="Reported version")
    environment: str = Field(default="development", alias="ENVIRONMENT", description="Reported environment")
    sample_rate: float = Field(default=1.0, alias="LOGFIRE_SAMPLE_RATE", description="Head sampling rate")

    model_config = {"populate_by_name": True}

    @property
    def enabled(self) -> bool:
        return bool(self.token)


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Grouped views (``server``, ``database``, ``email``, ``telemetry``, ``cors``) are
    computed from the flat fields so callers can depend on just the part they use.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    environment: str = Field(default="development", alias="ENVIRONMENT", description="Deployment environment")
    server_host: str = Field(default="0.0.0.0", alias="POSTBOARD_SERVER_HOST", description="Server bind host")
    server_port: int = Field(default=8000, ge=1, le=65535, alias="PORT", description="Server port number")
    log_level: str = Field(default="INFO", alias="POSTBOARD_LOG_LEVEL", description="Console logging level")
    log_format: str = Field(default="detailed", alias="LOG_FORMAT", description="simple, detailed or json")
    enable_file_logging: bool = Field(default=False, alias="ENABLE_FILE_LOGGING", description="Write logs/ files")
    log_file_dir: str = Field(default="logs", alias="LOG_FILE_DIR", description="Directory for log files")

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./postboard.db",
        alias="DATABASE_URL",
        description="Async SQLAlchemy connection URL for the application database",
    )
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO", description="Echo SQL statements")

    # =====================================================================
    # E-mail Configuration
    # =====================================================================
    sendgrid_api_key: Optional[str] = Field(default=None, alias="SENDGRID_API_KEY", description="SendGrid API key")
    email_from: str = Field(default="no-reply@postboard.local", alias="EMAIL_FROM", description="Sender address")
    sendgrid_base_url: str = Field(
        default="https://api.sendgrid.com", alias="SENDGRID_BASE_URL", description="SendGrid API base URL"
    )
    email_timeout_seconds: float = Field(default=10.0, gt=0, alias="EMAIL_TIMEOUT_SECONDS")

    # =====================================================================
    # Telemetry Configuration
    # =====================================================================
    logfire_token: Optional[str] = Field(default=None, alias="LOGFIRE_TOKEN", description="Logfire write token")
    logfire_service_name: str = Field(default="postboard", alias="LOGFIRE_SERVICE_NAME")
    logfire_service_version: str = Field(default="0.1.0", alias="LOGFIRE_SERVICE_VERSION")
    logfire_sample_rate: float = Field(default=1.0, ge=0.0, le=1.0, alias="LOGFIRE_SAMPLE_RATE")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    # =====================================================================
    # Validation
    # =====================================================================

    @field_validator("environment")
    @classmethod
    def _check_environment(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ENVIRONMENTS:
            raise ValueError(f"ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}, got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return value

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ("simple", "detailed", "json"):
            raise ValueError(f"LOG_FORMAT must be simple, detailed or json, got {value!r}")
        return value

    @model_validator(mode="after")
    def _check_production_requirements(self) -> "Settings":
        if self.environment != "production":
            return self
        missing = []
        if self.database.is_sqlite:
            missing.append("DATABASE_URL must point to a server database in production")
        if not self.sendgrid_api_key:
            missing.append("SENDGRID_API_KEY is required in production")
        if missing:
            raise ValueError("; ".join(missing))
        return self

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def server(self) -> ServerConfig:
        """Get HTTP server configuration."""
        return ServerConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def email(self) -> EmailConfig:
        """Get SendGrid e-mail configuration."""
        return EmailConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def telemetry(self) -> TelemetryConfig:
        """Get Logfire telemetry configuration."""
        return TelemetryConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()


def get_settings() -> Settings:
    """Dependency provider returning the process-wide settings instance."""
    return settings
