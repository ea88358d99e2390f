"""Cart Pricing Configuration"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.pricing import BracketScheme

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_prefix="CART_PRICING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Cart Pricing"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8002
    log_level: str = "INFO"

    # Line-oriented input
    order_name_prefix: str = "Order-"

    # Pricing
    bracket_scheme: BracketScheme = BracketScheme.OBSERVED


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def configure_logging(level: str) -> None:
    """Configure root logging once for an entry point"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
