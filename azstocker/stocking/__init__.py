from .errors import CalendarError, RowLengthError, ScheduleError, StockingError, UnknownProgramError
from .models import AZ_TIME, Calendar, Fish, Program, StockingData, Week
from .programs import SHEETS, SheetDescriptor
from .schedule import StockingSchedule, get


__all__ = [
    "AZ_TIME",
    "Calendar",
    "CalendarError",
    "Fish",
    "Program",
    "RowLengthError",
    "SHEETS",
    "ScheduleError",
    "SheetDescriptor",
    "StockingData",
    "StockingError",
    "StockingSchedule",
    "UnknownProgramError",
    "Week",
    "get",
]
