"""Module: config."""

from pydantic import Field
from pydantic_settings import BaseSettings

# Centralized runtime configuration, overridable through ECHO_* environment variables.
class Settings(BaseSettings):
    # Bind address for the HTTP listener.
    host: str = "0.0.0.0"
    # Bind port; the service contract is published on 8083.
    port: int = 8083
    # Number of workers that may run handlers at the same time.
    worker_pool_size: int = Field(default=10, ge=1)
    # Root log level for the console handler.
    log_level: str = "INFO"
    # Tag prefixed to every request trace line, e.g. "[python] Received request: ...".
    service_tag: str = "python"

    # Configure pydantic-settings to also load values from local .env file.
    class Config:
        env_prefix = "ECHO_"
        env_file = ".env"

# Global settings instance imported by app modules at runtime.
settings = Settings()
