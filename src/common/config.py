"""環境変数ベースの設定管理。"""
from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """CLI の既定値。ライブラリ関数は設定を読まない。"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    phonetic: bool = Field(default=False, validation_alias=AliasChoices("KANA_PHONETIC", "PHONETIC"))
    log_level: str = Field(
        default="WARNING",
        validation_alias=AliasChoices("KANA_LOG_LEVEL", "LOG_LEVEL"),
    )
    max_workers: int = Field(
        default=1,
        validation_alias=AliasChoices("KANA_MAX_WORKERS", "MAX_WORKERS"),
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("max_workers")
    @classmethod
    def _at_least_one(cls, value: int) -> int:
        return max(1, value)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """設定をシングルトンで取得する。"""

    return Settings()
