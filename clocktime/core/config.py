"""Library configuration settings"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings"""

    # Time defaults
    default_format: str = Field(default="HH:mm:ss")
    default_mode: Literal["clock", "duration"] = Field(default="clock")

    # Logging
    log_level: str = Field(default="INFO")

    class Config:
        env_prefix = "CLOCKTIME_"
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
