"""Configuration management for s3-file-manager."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    log_format: str = "json"
    otel_enabled: bool = False
    otel_service_name: str = "s3-file-manager"

    # Default bucket location used by the CLI and initialize_from_settings()
    region: str = "us-east-1"
    bucket_name: Optional[str] = None
    root_folder_name: str = ""
    endpoint_url: Optional[str] = None

    model_config = {
        "env_prefix": "S3FM_",
        "case_sensitive": False,
    }


settings = Settings()
