"""
Configuration management using pydantic-settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from suicore.constants import SUI_COIN_TYPE

from suiwallet.wallet.models import PickMethod


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SUI_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    pick_method: PickMethod = PickMethod.SMALLEST_FIRST
    coin_type: str = SUI_COIN_TYPE

    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings()
