from dataclasses import dataclass
from typing import Optional

from .errors import UnknownProgramError
from .models import Program


@dataclass(frozen=True)
class SheetDescriptor:
    """Where a program's schedule lives in the published spreadsheets"""

    program: Program
    spreadsheet_id: str
    sheet_name: str
    # A1 notation range with the water name and schedule
    schedule_range: str
    # A1 notation range with the month and day header rows
    date_range: str
    # column deleted from the sheet that still shows up as empty in the raw data
    skip_column: Optional[int] = None


SHEETS = {
    Program.CFP: SheetDescriptor(
        program=Program.CFP,
        spreadsheet_id="1xJYPRrX2Gb7ACr6HxPB7mlsCw9K8NvClLfBIw7qjTcA",
        sheet_name="CFP Stocking Calendar Schedule",
        schedule_range="A11:Z",
        date_range="B8:9",
    ),
    Program.WINTER: SheetDescriptor(
        program=Program.WINTER,
        spreadsheet_id="1PZuTV-zi5vMdxaMSnGx6c-QxeQQm-6DRQJJPKAZDjZM",
        sheet_name="2024-25 Winter",
        schedule_range="A9:AD",
        date_range="B4:5",
        skip_column=5,
    ),
    Program.SPRING_SUMMER: SheetDescriptor(
        program=Program.SPRING_SUMMER,
        spreadsheet_id="1S5wsDfGzEInV64UKjUPzexAe2KOO1KocfB4dJH7oVrs",
        sheet_name="2025 Spring/Summer",
        schedule_range="A9:AD",
        date_range="B4:5",
        skip_column=5,
    ),
}


def get_sheet(program: Program) -> SheetDescriptor:
    try:
        return SHEETS[program]
    except KeyError:
        raise UnknownProgramError(f"unable to find sheet for program {program!r}") from None
