from typing import Optional
from dotenv import load_dotenv
import os
from os.path import join, dirname


# Load environment variables from .env file
dotenv_path = join(dirname(__file__), ".env")
load_dotenv(dotenv_path)


class Settings:
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017/LibreChat")
    DB_NAME: Optional[str] = os.getenv("DB_NAME")
    MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", 5000))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


# Instantiate Settings
settings = Settings()
