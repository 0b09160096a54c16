from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Tessellation
    board_margin: float = 0.92

    # Tray layout
    tray_padding: int = 8

    # Game loop
    tick_interval_seconds: float = 1.0
    default_level: int = 1
    random_seed: int | None = None

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="ALUGARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
