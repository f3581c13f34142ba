# client configuration
# loads env vars for backend urls, request timeout, local storage path

import os
from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# load .env from project root
load_dotenv(Path(__file__).parent.parent / ".env")


class Settings(BaseSettings):
    # backend services
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:5000")
    CHATBOT_API_BASE_URL: str = os.getenv("CHATBOT_API_BASE_URL", "http://localhost:5003")
    REQUEST_TIMEOUT_SECONDS: float = 15.0

    # local persistence (sqlite key/value file)
    STORAGE_PATH: str = os.getenv("STORAGE_PATH", str(Path.home() / ".dropout_client" / "storage.db"))

    # logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
