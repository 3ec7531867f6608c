from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DEFAULT_SIZE: int = 5
    DEFAULT_QUANTITY: int = 100
    DEFAULT_FINISH: str = "vinil_blanco"
    DEFAULT_SHIPPING: float = 159.0

    LOG_LEVEL: str = "INFO"

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    model_config = SettingsConfigDict(env_prefix="STICKER_", env_file=".env", extra="ignore")


settings = Settings()


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
