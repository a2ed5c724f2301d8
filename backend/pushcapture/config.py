"""
Configuration management for PushCapture.

Holds the application settings (environment driven) and the push
configuration value objects that flow through the validate/save pipeline.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings


class ConfigurationState(BaseModel):
    """Raw values entered on the configuration screen."""
    app_id: str = ""
    initiator_url: str = ""  # Push Initiator URL, e.g. https://pi.example.com/pushsample
    gateway_url: str = ""  # PPG URL, e.g. http://cp1234.pushapi.eval.blackberry.com
    uses_sdk_as_initiator: bool = False
    using_public_gateway: bool = True
    launch_app: bool = False


class ValidatedConfig(BaseModel):
    """Push configuration that passed validation, with all strings trimmed."""
    app_id: str = ""
    initiator_url: str = ""
    gateway_url: str = ""
    uses_sdk_as_initiator: bool = False
    using_public_gateway: bool = True
    launch_app: bool = False

    model_config = ConfigDict(frozen=True)


class PushServiceOptions(BaseModel):
    """Arguments handed to the push service factory after a successful save."""
    app_id: Optional[str] = Field(
        None,
        description="Application ID (None lets an enterprise gateway use its default)"
    )
    initiator_url: Optional[str] = Field(None, description="Only set when the SDK is the push initiator")
    gateway_url: Optional[str] = Field(None, description="Only set for the public gateway")
    launch_app: bool = False

    @classmethod
    def from_config(cls, config: ValidatedConfig) -> "PushServiceOptions":
        return cls(
            app_id=config.app_id or None,
            initiator_url=config.initiator_url if config.uses_sdk_as_initiator else None,
            gateway_url=config.gateway_url if config.using_public_gateway else None,
            launch_app=config.launch_app,
        )


class Settings(BaseSettings):
    """Application settings loaded from environment and .env file."""

    # Application
    app_name: str = "PushCapture"
    app_version: str = Field(default_factory=lambda: __import__('pushcapture').__version__)
    debug: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    # Local embedded store
    database_url: str = Field(
        "sqlite+aiosqlite:///./pushcapture.db",
        description="Database connection URL (SQLite embedded)"
    )

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = Field(None, description="Directory for the rotating log file (console only when unset)")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        env_nested_delimiter = "__"


# Global settings instance
settings = Settings()
