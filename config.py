"""Application settings, read from HOTCRAZY_* environment variables or a .env file."""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    page_title: str = Field(default="Hot vs Crazy Matrix")
    log_level: str = Field(default="INFO")
    # Rating assumed for a criterion a person has not been scored on yet
    default_score: float = Field(default=5.0, ge=0.0, le=10.0)
    new_criterion_weight: float = Field(default=0.1, ge=0.0, le=1.0)
    equal_split_weights: bool = Field(default=False)
    normalized_scoring: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_prefix="HOTCRAZY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
