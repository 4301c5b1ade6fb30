"""Application configuration from environment variables."""

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

from growth_calculator.core.cagr import LookbackPeriod

DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Application
    app_name: str = "Investment Growth Calculator"
    version: str = "1.0.0"
    log_level: str = "INFO"

    # Static fund data
    nav_data_path: Path = DATA_DIR / "navs.json"
    dividend_data_path: Path = DATA_DIR / "dividends.json"

    # Calculator defaults
    default_deposit: float = 50000.0
    default_timeframe: LookbackPeriod = LookbackPeriod.TEN_YEARS

    # Front-end origins allowed to call /api/*
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


settings = Settings()
