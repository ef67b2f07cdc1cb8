from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""
    service_name: str = "dermarec"
    algorithm_version: str = "v3.0-comprehensive-ml"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="DERMAREC_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
