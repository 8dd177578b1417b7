class StockingError(Exception):
    """Base exception for stocking schedule errors"""

    pass


class UnknownProgramError(StockingError, ValueError):
    """Raised when a program name or identity is not supported"""

    pass


class CalendarError(StockingError):
    """Raised when the date header of a sheet cannot be turned into a calendar"""

    pass


class RowLengthError(StockingError):
    """Raised when a schedule row does not line up with the calendar dates"""

    pass


class ScheduleError(StockingError):
    """Raised when the schedule block of a sheet cannot be read"""

    pass
