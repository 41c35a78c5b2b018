import os
from pathlib import Path
from dotenv import load_dotenv
from typing import List

# .env lives next to this file
env_path = Path(__file__).parent / '.env'
load_dotenv(env_path)


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./inventory.db")
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

    CORS_ORIGINS: List[str] = [
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
    ]
    PLACEHOLDER_IMAGE_URL: str = os.getenv("PLACEHOLDER_IMAGE_URL", "https://via.placeholder.com/150")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # used by the API client
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:5000")


settings = Settings()
