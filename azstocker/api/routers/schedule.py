import logging
from datetime import date, datetime
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from azstocker.api.dependencies import get_clock, get_sheets_client
from azstocker.stocking.errors import StockingError, UnknownProgramError
from azstocker.stocking.models import Calendar, Clock, Fish, Program, Week
from azstocker.stocking.schedule import RangeFetcher, StockingSchedule


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/programs", tags=["schedule"])


class WeekSummary(BaseModel):
    week_of: date
    stock: str
    description: str
    relative: str

    @classmethod
    def from_week(cls, week: Week, now: datetime) -> "WeekSummary | None":
        if week.is_zero:
            return None
        return cls(
            week_of=week.time().date(),
            stock=week.stock.value,
            description=str(week),
            relative=week.human_time(now),
        )


class CalendarSummary(BaseModel):
    water_name: str
    next: WeekSummary | None
    last: WeekSummary | None
    weeks: list[WeekSummary]


class ProgramSchedule(BaseModel):
    program: str
    sorted_by: str
    waters: list[CalendarSummary]


def parse_waters(waters: str | None) -> list[str]:
    """Split a comma-separated waters query parameter"""
    if not waters:
        return []
    return [w.strip() for w in waters.split(",") if w.strip()]


def summarize(calendar: Calendar, show_all: bool, now: datetime) -> CalendarSummary:
    weeks = [w for w in calendar.data if show_all or w.stock != Fish.NONE]
    return CalendarSummary(
        water_name=calendar.water_name,
        next=WeekSummary.from_week(calendar.next(now), now),
        last=WeekSummary.from_week(calendar.last(now), now),
        weeks=[WeekSummary.from_week(w, now) for w in weeks],
    )


@router.get("")
async def list_programs() -> list[str]:
    """Return the supported programs."""
    return [p.value for p in Program]


@router.get("/{program}")
def get_program_schedule(
    program: str,
    sheets_client: Annotated[RangeFetcher, Depends(get_sheets_client)],
    clock: Annotated[Clock, Depends(get_clock)],
    waters: str | None = None,
    sort_by: Annotated[Literal["", "next", "last"], Query(alias="sortBy")] = "",
    show_all: Annotated[bool, Query(alias="showAll")] = False,
) -> ProgramSchedule:
    """Return the stocking schedule of a program, optionally limited to some waters."""
    try:
        parsed_program = Program.parse(program)
    except UnknownProgramError as e:
        logger.error(f"Invalid program {program!r}: {e}")
        raise HTTPException(status_code=404, detail=str(e))

    water_names = parse_waters(waters)
    try:
        stocking_data = StockingSchedule(sheets_client, clock).get(parsed_program, water_names)
    except StockingError as e:
        logger.error(f"Failed to get data for {parsed_program.value}: {e}")
        raise HTTPException(status_code=502, detail=f"Unable to read stocking schedule: {e}")

    now = clock()
    if sort_by == "next":
        stocking_data.sort_by_next(now)
    elif sort_by == "last":
        stocking_data.sort_by_last(now)
    else:
        stocking_data.sort_by_name()

    return ProgramSchedule(
        program=parsed_program.value,
        sorted_by=sort_by,
        waters=[summarize(c, show_all, now) for c in stocking_data],
    )
