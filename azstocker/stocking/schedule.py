import logging
from typing import Any, Iterable, List, Optional, Protocol, Union

from .errors import CalendarError, ScheduleError, StockingError
from .models import Calendar, Clock, Program, StockingData, az_now
from .parser import cell_as_string, initialize_calendar, map_row
from .programs import SheetDescriptor, get_sheet

logger = logging.getLogger(__name__)


class RangeFetcher(Protocol):
    """Anything that can read a rectangular range of cells from a spreadsheet"""

    def get_range(self, spreadsheet_id: str, sheet_name: str, a1_range: str) -> List[List[Any]]:
        ...


class StockingSchedule:
    """Reads the stocking schedule of a program into a Calendar per water"""

    def __init__(self, sheets_client: RangeFetcher, clock: Optional[Clock] = None):
        self.sheets_client = sheets_client
        self.clock = clock or az_now

    def get(
        self, program: Union[Program, str], water_names: Optional[Iterable[str]] = None
    ) -> StockingData:
        """Parse the sheet for a program. If water names are given, only those waters
        are returned, matched ignoring case. Otherwise all waters are returned in sheet order
        """
        if not isinstance(program, Program):
            program = Program.parse(program)
        sheet = get_sheet(program)

        wanted = [name.lower() for name in water_names or []]

        dates = self._initialize_calendar(sheet)
        return self._get_stocking_data(sheet, dates, wanted)

    def _initialize_calendar(self, sheet: SheetDescriptor) -> Calendar:
        try:
            rows = self.sheets_client.get_range(sheet.spreadsheet_id, sheet.sheet_name, sheet.date_range)
        except Exception as e:
            logger.error(f"Error reading dates for {sheet.program.value}: {e}")
            raise CalendarError(f"error initializing calendar: {e}") from e

        try:
            return initialize_calendar(rows, self.clock())
        except CalendarError as e:
            logger.error(f"Invalid date header for {sheet.program.value}: {e}")
            raise CalendarError(f"error initializing calendar: {e}") from e

    def _get_stocking_data(
        self, sheet: SheetDescriptor, dates: Calendar, wanted: List[str]
    ) -> StockingData:
        try:
            rows = self.sheets_client.get_range(
                sheet.spreadsheet_id, sheet.sheet_name, sheet.schedule_range
            )
        except Exception as e:
            logger.error(f"Error reading schedule for {sheet.program.value}: {e}")
            raise ScheduleError(f"error finding water rows: {e}") from e

        result = StockingData()
        for row in rows:
            if len(row) < 2:
                continue

            water_name = cell_as_string(row[0])
            if not water_name:
                continue
            if wanted and water_name.lower() not in wanted:
                continue

            try:
                calendar = map_row(row[1:], dates, sheet.skip_column)
            except StockingError as e:
                logger.warning(f"Error getting data for row {water_name!r}: {e}")
                continue

            calendar.water_name = water_name
            result.append(calendar)

        logger.info(f"Parsed {len(result)} waters for {sheet.program.value}")
        return result


def get(
    sheets_client: RangeFetcher,
    program: Union[Program, str],
    water_names: Optional[Iterable[str]] = None,
    clock: Optional[Clock] = None,
) -> StockingData:
    """Shortcut for StockingSchedule(sheets_client, clock).get(program, water_names)"""
    return StockingSchedule(sheets_client, clock).get(program, water_names)
