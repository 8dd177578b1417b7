from datetime import datetime, timezone

import pytest

from azstocker.stocking.models import AZ_TIME, Program
from tests.fixtures import (
    CFP_DAYS,
    CFP_MONTHS,
    CFP_SCHEDULE,
    WINTER_DAYS,
    WINTER_MONTHS,
    WINTER_SCHEDULE,
    FakeSheetsClient,
    sheet_ranges,
)


@pytest.fixture
def ranges():
    return {
        **sheet_ranges(Program.WINTER, [WINTER_MONTHS, WINTER_DAYS], WINTER_SCHEDULE),
        **sheet_ranges(Program.CFP, [CFP_MONTHS, CFP_DAYS], CFP_SCHEDULE),
    }


@pytest.fixture
def sheets_client(ranges):
    return FakeSheetsClient(ranges)


@pytest.fixture
def winter_clock():
    return lambda: datetime(2025, 1, 15, 12, 0, tzinfo=AZ_TIME)


@pytest.fixture
def cfp_now():
    return datetime(2024, 11, 2, 13, 0, tzinfo=timezone.utc)


@pytest.fixture
def cfp_clock(cfp_now):
    return lambda: cfp_now
