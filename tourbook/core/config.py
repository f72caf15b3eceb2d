import os
from typing import List
from functools import lru_cache


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings read from the environment"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Database
    DB_DSN: str = "sqlite+aiosqlite:///./tourbook.db"
    DB_ECHO: bool = False
    SEED_CATALOG: bool = True

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = []
    CORS_ALLOW_CREDENTIALS: bool = False

    # Frontend
    API_BASE_URL: str = ""

    # Rate Limiting
    RATE_LIMIT_DEFAULT: str = "100/minute"

    # Business Rules
    BOOKINGS_LIST_LIMIT: int = 100

    # Logging
    LOG_LEVEL: str = "INFO"

    def __init__(self):
        self.HOST = os.getenv("HOST", self.HOST)
        self.PORT = self._parse_int("PORT", str(self.PORT))
        self.DB_DSN = os.getenv("DB_DSN", self.DB_DSN)
        self.DB_ECHO = _env_bool("DB_ECHO", "false")
        self.SEED_CATALOG = _env_bool("SEED_CATALOG", "true")
        self.API_BASE_URL = os.getenv("API_BASE_URL", "").rstrip("/")
        self.RATE_LIMIT_DEFAULT = os.getenv("RATE_LIMIT_DEFAULT", self.RATE_LIMIT_DEFAULT)
        self.BOOKINGS_LIST_LIMIT = self._parse_int("BOOKINGS_LIST_LIMIT", str(self.BOOKINGS_LIST_LIMIT))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", self.LOG_LEVEL).upper()
        self._validate()
        self._parse_cors_origins()

    @staticmethod
    def _parse_int(name: str, default: str) -> int:
        raw = os.getenv(name, default)
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{name} must be an integer, got {raw!r}") from None

    def _validate(self):
        """Validate settings"""
        if not 1 <= self.PORT <= 65535:
            raise ValueError(f"PORT must be between 1 and 65535, got {self.PORT}")
        if not self.DB_DSN:
            raise ValueError("DB_DSN environment variable must not be empty")
        if self.BOOKINGS_LIST_LIMIT < 1:
            raise ValueError("BOOKINGS_LIST_LIMIT must be positive")

    def _parse_cors_origins(self):
        """Parse CORS origins from environment"""
        raw_origins = os.getenv("CORS_ALLOW_ORIGINS", "*")

        if raw_origins.strip() == "*":
            self.CORS_ALLOW_ORIGINS = ["*"]
            self.CORS_ALLOW_CREDENTIALS = False  # wildcard forbids credentials
        else:
            self.CORS_ALLOW_ORIGINS = [o.strip() for o in raw_origins.split(",") if o.strip()]
            self.CORS_ALLOW_CREDENTIALS = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
