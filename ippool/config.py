from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    data_store_path: Path = Path("datastore") / "JSON-DataStore.json"
    # Blocks are capped at 256 addresses since every mutation rewrites the whole pool
    minimum_mask_bits: int = Field(24, ge=24, le=32)
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"
    log_format: str = "%(levelname)s - %(asctime)s - %(name)s - %(message)s"
    host: str = "127.0.0.1"
    port: int = 8080

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
