"""Configuration management using Pydantic Settings"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "fee-gateway"
    log_level: str = "INFO"

    # Receipt presentation
    currency_name: str = "Rupees"
    currency_symbol: str = "Rs."
    numbering_system: Literal["indian", "western"] = "indian"


settings = Settings()
