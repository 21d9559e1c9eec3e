from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


CURRENCY_SYMBOLS = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    currency: str = Field("EUR", alias="TRIPSHARE_CURRENCY")
    log_level: str = Field("INFO", alias="TRIPSHARE_LOG_LEVEL")
    trip_code_prefix: str = Field("TF", alias="TRIPSHARE_TRIP_CODE_PREFIX")

    @property
    def currency_symbol(self) -> str:
        return CURRENCY_SYMBOLS.get(self.currency.upper(), self.currency.upper())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
