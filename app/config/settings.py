# app/config/settings.py
from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    # App Info
    app_name: str = "Expense Tracker API"
    version: str = "1.0.0"
    debug: bool = False

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./expenses.db")
    auto_create_tables: bool = True

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", 8000))

    @property
    def is_sqlite(self) -> bool:
        """SQLite necesita connect_args propios"""
        return self.database_url.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'

settings = Settings()
