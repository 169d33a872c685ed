"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Server
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    PORT: int = int(os.getenv("PORT", "8050"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Site
    SITE_NAME: str = os.getenv("SITE_NAME", "Essential Oils Guide & Recipes")

    # i18n
    DEFAULT_LANG: str = os.getenv("DEFAULT_LANG", "en")
    # localStorage namespace for the visitor's language choice
    STORAGE_KEY: str = os.getenv("STORAGE_KEY", "essentialoils_language")


settings = Settings()
