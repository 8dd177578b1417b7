import logging
import threading
import time
from typing import Any, List, Optional

from google.api_core import retry
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

logger = logging.getLogger(__name__)

TRANSIENT_STATUS_CODES = {429, 500, 502, 503, 504}


class SheetError(Exception):
    """Custom exception for sheet-related errors"""

    pass


def _is_transient(exc: Exception) -> bool:
    return isinstance(exc, HttpError) and exc.resp.status in TRANSIENT_STATUS_CODES


class GoogleSheetsClient:
    """Reads cell ranges from published Google Sheets.

    A built service holds one httplib2 connection, which must not be shared between
    threads, so every thread gets its own service. A service passed in is used as is.
    """

    SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]

    def __init__(
        self,
        api_key: Optional[str] = None,
        credentials_path: Optional[str] = None,
        service=None,
    ):
        self.api_key = api_key
        self.credentials_path = credentials_path
        self._shared_service = service
        self._local = threading.local()
        if service is None:
            # fail early on bad credentials
            self._local.service = self._build_sheets_service()

    @property
    def service(self):
        if self._shared_service is not None:
            return self._shared_service
        service = getattr(self._local, "service", None)
        if service is None:
            logger.debug(f"Building sheets service for thread {threading.current_thread().name}")
            service = self._local.service = self._build_sheets_service()
        return service

    def _build_sheets_service(self):
        """Create and return a Sheets API service object using an API key or service account"""
        if not self.api_key and not self.credentials_path:
            raise SheetError("An API key or credentials path is required")

        try:
            if self.credentials_path:
                creds = service_account.Credentials.from_service_account_file(
                    self.credentials_path, scopes=self.SCOPES
                )
                return build("sheets", "v4", credentials=creds, cache_discovery=False)
            return build("sheets", "v4", developerKey=self.api_key, cache_discovery=False)
        except Exception as e:
            logger.error(f"Failed to build sheets service: {e}")
            raise SheetError(f"Could not initialize sheets service: {str(e)}")

    @retry.Retry(predicate=_is_transient, initial=0.5, maximum=5.0, timeout=30.0)
    def _get_values(self, spreadsheet_id: str, range_name: str) -> dict:
        return (
            self.service.spreadsheets()
            .values()
            .get(spreadsheetId=spreadsheet_id, range=range_name)
            .execute()
        )

    def get_range(self, spreadsheet_id: str, sheet_name: str, a1_range: str) -> List[List[Any]]:
        """Read a rectangular range of cells. Trailing empty cells of each row may be missing"""
        range_name = f"{sheet_name}!{a1_range}"
        start = time.monotonic()
        logger.debug(f"Starting request for {range_name}")
        try:
            result = self._get_values(spreadsheet_id, range_name)
        except Exception as e:
            logger.error(f"Error reading range {range_name}: {e}")
            raise SheetError(f"Failed to read range {range_name}: {str(e)}")

        logger.debug(f"Finished request for {range_name} in {time.monotonic() - start:.3f}s")
        return result.get("values", [])
