import logging
import re
from datetime import MAXYEAR, MINYEAR, datetime
from typing import Any, Iterator, List, NamedTuple, Optional, Sequence

from .errors import CalendarError, RowLengthError
from .models import Calendar, Fish, Week

logger = logging.getLogger(__name__)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


MONTHS = {
    "january": 1,
    "february": 2,
    # typo in the CFP sheet
    "feburary": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}


class SheetMonth(NamedTuple):
    """A month label from a date header, with the year if the sheet spells it out"""

    month: int
    year: Optional[int] = None


def cell_as_string(cell: Any) -> str:
    """Return a trimmed string for a raw cell. Anything that is not a string counts as empty"""
    if not isinstance(cell, str):
        return ""
    return cell.strip()


def non_empty_cells(cells: Sequence[Any]) -> Iterator[str]:
    for cell in cells:
        value = cell_as_string(cell)
        if value:
            yield value


def parse_int(text: str) -> Optional[int]:
    """Parse a plain base-10 integer. Whitespace and digit separators are not accepted"""
    if not INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def parse_month(text: str) -> Optional[SheetMonth]:
    """Parse a label like "OCTOBER" or "OCTOBER 2025". Returns None if it is not a month"""
    parts = text.split(" ")
    month = MONTHS.get(parts[0].lower())
    if month is None:
        return None

    year = None
    if len(parts) == 2:
        year = parse_int(parts[1])
        # year 0 means the sheet did not give one
        if year is not None and not MINYEAR <= year <= MAXYEAR:
            year = None
    return SheetMonth(month, year)


def parse_day(text: str) -> Optional[int]:
    """Parse a day cell. Ranges like "7-11" use the first day"""
    return parse_int(text.split("-")[0])


def choose_current_year(months: Sequence[SheetMonth], now: datetime) -> int:
    """Decide the year of the first column from the month positions alone.

    An explicit year on the first month wins. Otherwise, a sheet whose first month
    comes after its last month (November through March) is assumed to have started
    last year.
    """
    if months and months[0].year is not None:
        return months[0].year

    if len(months) < 2:
        return now.year

    if months[0].month > months[-1].month:
        return now.year - 1

    return now.year


def is_new_year(months: Sequence[SheetMonth], index: int) -> bool:
    if index <= 0 or index >= len(months):
        return False
    return months[index].month == 1 and months[index - 1].month == 12


def month_years(months: Sequence[SheetMonth], now: datetime) -> List[int]:
    """Return the year of every header month.

    The first month with an explicit year anchors the sheet. Months before it count
    December to January steps backwards from the anchor, months after it count them
    forwards. Any later explicit year resets the running year. Without explicit years
    the first month's year is guessed from the month positions.
    """
    anchor = next((i for i, month in enumerate(months) if month.year is not None), None)
    if anchor is None:
        anchor = 0
        year = choose_current_year(months, now)
    else:
        year = months[anchor].year

    years = [0] * len(months)
    if not months:
        return years

    years[anchor] = year
    for i in range(anchor - 1, -1, -1):
        years[i] = years[i + 1] - 1 if is_new_year(months, i + 1) else years[i + 1]
    for i in range(anchor + 1, len(months)):
        if months[i].year is not None:
            years[i] = months[i].year
        elif is_new_year(months, i):
            years[i] = years[i - 1] + 1
        else:
            years[i] = years[i - 1]
    return years


def initialize_calendar(rows: Sequence[Sequence[Any]], now: datetime) -> Calendar:
    """Build the dated, unstocked weeks of a sheet from its month and day header rows"""
    if len(rows) != 2:
        raise CalendarError(f"expected 2 rows but got {len(rows)}")

    month_cells, day_cells = rows
    months: List[SheetMonth] = []
    for label in non_empty_cells(month_cells):
        month = parse_month(label)
        if month is not None:
            months.append(month)

    years = month_years(months, now)
    result = Calendar()
    month_index = 0
    prev_day = -1
    for cell in non_empty_cells(day_cells):
        day = parse_day(cell)
        if day is None:
            logger.debug(f"Skipping day cell {cell!r}")
            continue

        # a smaller day number starts the next month
        if day < prev_day:
            month_index += 1
        prev_day = day

        if month_index >= len(months):
            raise CalendarError(
                f"month index {month_index} out of range for {len(months)} header months"
            )

        result.data.append(Week(year=years[month_index], month=months[month_index].month, day=day))

    return result


def map_row(cells: Sequence[Any], dates: Calendar, skip_column: Optional[int] = None) -> Calendar:
    """Combine the stock cells of one water with the sheet dates.

    cells excludes the water name. skip_column is the index of a deleted column that
    still shows up in the raw data.
    """
    skipped = 1 if skip_column is not None else 0
    cells = list(cells)

    # trailing empty cells are trimmed by the API
    missing = len(dates.data) - (len(cells) - skipped)
    if missing > 0:
        cells.extend([""] * missing)

    if len(cells) - skipped != len(dates.data):
        raise RowLengthError(
            f"dates and stock rows don't match: {len(dates.data)} != {len(cells) - skipped}"
        )
    if skip_column is not None and skip_column >= len(cells):
        raise RowLengthError(f"skip column {skip_column} is past the end of a {len(cells)} cell row")

    result = Calendar(water_name=dates.water_name)
    remaining = iter(dates.data)
    for i, cell in enumerate(cells):
        if i == skip_column:
            continue
        week = next(remaining)
        result.data.append(week.with_stock(Fish.parse(cell_as_string(cell))))
    return result
