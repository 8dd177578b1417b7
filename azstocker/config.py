import os
from typing import Optional

from dotenv import load_dotenv

DEFAULT_URL_BASE = "http://localhost:8080"


def load_config(api_key: Optional[str] = None, credentials_path: Optional[str] = None) -> dict:
    """Load configuration from environment variables. Explicit arguments win over the environment"""
    load_dotenv()

    config = {
        "API_KEY": api_key or os.getenv("API_KEY"),
        "CREDENTIALS_PATH": credentials_path or os.getenv("CREDENTIALS_PATH"),
        "URL_BASE": os.getenv("URL_BASE", DEFAULT_URL_BASE).rstrip("/"),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),
    }

    if not config["API_KEY"] and not config["CREDENTIALS_PATH"]:
        raise EnvironmentError(
            "Missing required environment variables: API_KEY or CREDENTIALS_PATH"
        )

    return config
