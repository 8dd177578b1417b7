# azstocker/stocking/models.py
import calendar
import functools
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, List, Optional

import humanize

from .errors import UnknownProgramError

# Arizona does not observe daylight saving time
AZ_TIME = timezone(timedelta(hours=-7), "AZ")

Clock = Callable[[], datetime]


def az_now() -> datetime:
    """Return the current time in Arizona"""
    return datetime.now(AZ_TIME)


class Fish(Enum):
    """Type of fish stocked in a water for one week"""

    CATFISH = "Catfish"
    TROUT = "Trout"
    UNKNOWN = "Unknown"
    NONE = "None"

    @classmethod
    def parse(cls, code: str) -> "Fish":
        """Parse a stock code from a schedule cell"""
        code = code.lower()
        if code in ("x", "t"):
            return cls.TROUT
        if code == "c":
            return cls.CATFISH
        if code == "":
            return cls.NONE
        return cls.UNKNOWN


class Program(Enum):
    """AZ GFD stocking programs: cfp (community fishing program), winter, and
    spring/summer (spring and summer share one schedule)"""

    CFP = "cfp"
    WINTER = "winter"
    SPRING_SUMMER = "springsummer"

    @classmethod
    def parse(cls, text: str) -> "Program":
        """Parse a program name, ignoring case"""
        text = text.strip().lower()
        if text in ("spring", "summer"):
            return cls.SPRING_SUMMER
        try:
            return cls(text)
        except ValueError:
            raise UnknownProgramError(f"unknown program {text!r}") from None


@dataclass(frozen=True)
class Week:
    """A date on the calendar and the stocking outcome for that week range.

    The default instance (year 0, day 0) means no data was found.
    """

    year: int = 0
    month: int = 0
    day: int = 0
    stock: Fish = Fish.NONE

    @property
    def is_zero(self) -> bool:
        return self.year == 0 and self.day == 0

    def time(self) -> datetime:
        """Midnight of this week's date in Arizona time"""
        # out-of-range days roll over into the following month
        return datetime(self.year, self.month, 1, tzinfo=AZ_TIME) + timedelta(days=self.day - 1)

    def human_time(self, now: Optional[datetime] = None) -> str:
        """Relative time of this week, like "3 days ago" or "2 days from now"."""
        if self.is_zero:
            return "No Data"
        return humanize.naturaltime(self.time(), when=_resolve_now(now))

    def with_stock(self, stock: Fish) -> "Week":
        return replace(self, stock=stock)

    def __str__(self) -> str:
        if self.is_zero:
            return "No Data"
        return f'{self.year} {calendar.month_name[self.month]} {self.day}: "{self.stock.value}"'


def _resolve_now(now: Optional[datetime]) -> datetime:
    """Default to the current time. Naive datetimes are read as Arizona time"""
    if now is None:
        return az_now()
    if now.tzinfo is None:
        return now.replace(tzinfo=AZ_TIME)
    return now.astimezone(AZ_TIME)


@dataclass
class Calendar:
    """Ordered list of Weeks with all available stocking data for one water"""

    water_name: str = ""
    data: List[Week] = field(default_factory=list)

    def __str__(self) -> str:
        return self.format()

    def format(self, hide_empty: bool = True) -> str:
        """Format the weeks in order. With hide_empty, weeks without stocking are left out"""
        return "\n".join(str(week) for week in self.data if not (hide_empty and week.stock == Fish.NONE))

    def detail_format(
        self,
        show_all: bool = False,
        show_all_stock: bool = False,
        show_next: bool = False,
        show_last: bool = False,
        now: Optional[datetime] = None,
    ) -> str:
        """Format the Calendar with optional full listing and next/last lines"""
        # with no options set, only the scheduled stocking weeks are shown
        if not (show_all or show_all_stock or show_next or show_last):
            return self.format(hide_empty=True)

        lines = []
        if show_all:
            lines.append(self.format(hide_empty=False))
        elif show_all_stock:
            lines.append(self.format(hide_empty=True))

        if show_last:
            lines.append(f"Last: {self.last(now)}")
        if show_next:
            lines.append(f"Next: {self.next(now)}")

        return "\n".join(lines)

    def next(self, now: Optional[datetime] = None) -> Week:
        """Return the closest upcoming stocking week"""
        now = _resolve_now(now)
        for week in self.data:
            if week.stock in (Fish.NONE, Fish.UNKNOWN):
                continue
            if week.time() > now:
                return week
        return Week()

    def last(self, now: Optional[datetime] = None) -> Week:
        """Return the most recent stocking week"""
        now = _resolve_now(now)
        for week in reversed(self.data):
            if week.stock == Fish.NONE:
                continue
            if week.time() < now:
                return week
        return Week()


CompareFunc = Callable[[Calendar, Calendar], int]


def _compare_names(c1: Calendar, c2: Calendar) -> int:
    return (c1.water_name > c2.water_name) - (c1.water_name < c2.water_name)


def _compare_weeks(w1: Week, w2: Week, descending: bool = False) -> int:
    # waters without data always sort after waters with data
    if w1.is_zero and w2.is_zero:
        return 0
    if w1.is_zero:
        return 1
    if w2.is_zero:
        return -1
    t1, t2 = w1.time(), w2.time()
    if descending:
        t1, t2 = t2, t1
    return (t1 > t2) - (t1 < t2)


class StockingData(list):
    """Stocking Calendars for different waters"""

    def water_names(self) -> List[str]:
        return [c.water_name for c in self]

    def sort_by(self, compare: CompareFunc) -> None:
        """Stable in-place sort by compare, falling back to water name when compare is equal"""

        def _compare(c1: Calendar, c2: Calendar) -> int:
            result = compare(c1, c2)
            if result == 0:
                result = _compare_names(c1, c2)
            return result

        self.sort(key=functools.cmp_to_key(_compare))

    def sort_by_name(self) -> None:
        self.sort_by(lambda c1, c2: 0)

    def sort_by_next(self, now: Optional[datetime] = None) -> None:
        """Sort by closest upcoming stocking date"""
        now = _resolve_now(now)
        upcoming = {id(c): c.next(now) for c in self}
        self.sort_by(lambda c1, c2: _compare_weeks(upcoming[id(c1)], upcoming[id(c2)]))

    def sort_by_last(self, now: Optional[datetime] = None) -> None:
        """Sort by most recently stocked first"""
        now = _resolve_now(now)
        previous = {id(c): c.last(now) for c in self}
        self.sort_by(lambda c1, c2: _compare_weeks(previous[id(c1)], previous[id(c2)], descending=True))
