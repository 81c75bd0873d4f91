from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    currency: str = Field("ILS", alias="TRIPSPLIT_CURRENCY")
    log_level: str = Field("INFO", alias="TRIPSPLIT_LOG_LEVEL")
    csv_bom: bool = Field(True, alias="TRIPSPLIT_CSV_BOM")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
