"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="TERRAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Terrain defaults
    default_resolution: int = Field(default=4, ge=0, description="Default number of subdivisions")
    default_cell_size: float = Field(default=10.0, gt=0, description="Default distance between points")
    default_amplitude: float = Field(default=10.0, ge=0, description="Default initial amplitude")
    default_decay: float = Field(default=0.5, gt=0, le=1, description="Default amplitude decay per level")
    default_seed: int = Field(default=1, description="Default seed (0 disables randomness)")
    max_resolution: int = Field(default=10, ge=0, description="Largest resolution accepted by the API")

    # Output
    output_dir: str = Field(default="./output", description="Directory for CLI outputs")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")


settings = Settings()
