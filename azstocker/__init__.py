"""AZ Stocker - Arizona fish stocking schedules.

This package reads the fish stocking calendars published by the Arizona Game and
Fish Department as Google Sheets and turns them into a schedule per water.
"""

__version__ = "0.1.0"

from .sheets.client import GoogleSheetsClient
from .stocking import Calendar, Fish, Program, StockingData, StockingSchedule, Week, get


__all__ = [
    "Calendar",
    "Fish",
    "GoogleSheetsClient",
    "Program",
    "StockingData",
    "StockingSchedule",
    "Week",
    "get",
]
