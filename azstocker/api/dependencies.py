from typing import Optional

from azstocker.config import load_config
from azstocker.sheets.client import GoogleSheetsClient
from azstocker.stocking.models import Clock, az_now

# Set by configure() at startup, or loaded from the environment on first use
_config: Optional[dict] = None
_sheets_client: Optional[GoogleSheetsClient] = None


def configure(config: Optional[dict], sheets_client: Optional[GoogleSheetsClient] = None) -> None:
    """Use an already loaded config, and optionally an existing sheets client, for requests"""
    global _config, _sheets_client
    _config = config
    _sheets_client = sheets_client


def get_config() -> dict:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_sheets_client() -> GoogleSheetsClient:
    global _sheets_client
    if _sheets_client is None:
        config = get_config()
        _sheets_client = GoogleSheetsClient(
            api_key=config["API_KEY"],
            credentials_path=config["CREDENTIALS_PATH"],
        )
    return _sheets_client


def get_clock() -> Clock:
    return az_now


def get_url_base() -> str:
    return get_config()["URL_BASE"]
