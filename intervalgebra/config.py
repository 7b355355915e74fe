"""Environment-based configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from ``INTERVALGEBRA_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="INTERVALGEBRA_")

    check_preconditions: bool = False


settings = Settings()
