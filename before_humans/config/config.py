"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    # Sampling Configuration
    point_spacing: float = Field(
        default=0.009, gt=0, description="Sample grid spacing in degrees (~900m cells)"
    )
    jitter_fraction: float = Field(
        default=0.4, ge=0, lt=0.5, description="Max jitter as a fraction of the spacing"
    )

    # Host Configuration
    max_workers: int = Field(default=1, ge=1, description="Worker threads for background generation")

    class Config:
        env_prefix = "BEFORE_HUMANS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
