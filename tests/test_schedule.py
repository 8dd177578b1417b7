import logging

import pytest

from azstocker.sheets.client import SheetError
from azstocker.stocking.errors import CalendarError, ScheduleError, UnknownProgramError
from azstocker.stocking.models import Fish, Program, Week
from azstocker.stocking.programs import SHEETS
from azstocker.stocking.schedule import StockingSchedule, get
from tests.fixtures import CFP_WEEKS, WINTER_WEEKS, FakeSheetsClient


class TestGet:
    def test_all_waters_in_sheet_order(self, sheets_client, winter_clock):
        stocking_data = get(sheets_client, Program.WINTER, clock=winter_clock)

        assert stocking_data.water_names() == ["Phoenix Metro", "LOWER SALT RIVER", "GREEN VALLEY LAKE"]
        assert all(len(c.data) == WINTER_WEEKS for c in stocking_data)

    def test_reads_dates_then_schedule(self, sheets_client, winter_clock):
        get(sheets_client, Program.WINTER, clock=winter_clock)

        sheet = SHEETS[Program.WINTER]
        assert sheets_client.requests == [
            (sheet.spreadsheet_id, sheet.sheet_name, "B4:5"),
            (sheet.spreadsheet_id, sheet.sheet_name, "A9:AD"),
        ]

    def test_salt_river(self, sheets_client, winter_clock):
        stocking_data = get(sheets_client, Program.WINTER, ["LOWER SALT RIVER"], clock=winter_clock)

        assert len(stocking_data) == 1
        salt_river = stocking_data[0]
        assert salt_river.water_name == "LOWER SALT RIVER"
        assert salt_river.data[0] == Week(2024, 10, 1, Fish.TROUT)
        assert salt_river.data[1] == Week(2024, 10, 7, Fish.NONE)
        assert salt_river.data[14] == Week(2025, 1, 6, Fish.TROUT)
        assert salt_river.data[-1] == Week(2025, 3, 31, Fish.NONE)

    def test_skip_column_in_winter(self, sheets_client, winter_clock):
        (green_valley,) = get(sheets_client, "winter", ["green valley lake"], clock=winter_clock)

        stocked = [w for w in green_valley.data if w.stock != Fish.NONE]
        assert stocked == [Week(2024, 10, 1, Fish.CATFISH), Week(2024, 11, 4, Fish.CATFISH)]

    def test_filter_ignores_case(self, sheets_client, cfp_clock):
        stocking_data = get(sheets_client, Program.CFP, ["tempe - KIWANIS lake"], clock=cfp_clock)

        assert stocking_data.water_names() == ["Tempe - Kiwanis Lake"]
        assert len(stocking_data[0].data) == CFP_WEEKS

    def test_filter_without_matches(self, sheets_client, cfp_clock):
        assert get(sheets_client, Program.CFP, ["Lake Pleasant"], clock=cfp_clock) == []

    def test_cfp_dates(self, sheets_client, cfp_clock):
        (kiwanis,) = get(sheets_client, Program.CFP, ["Tempe - Kiwanis Lake"], clock=cfp_clock)

        assert kiwanis.data[0] == Week(2024, 10, 7, Fish.UNKNOWN)
        assert kiwanis.data[2] == Week(2024, 10, 21, Fish.CATFISH)
        assert kiwanis.data[-1] == Week(2024, 12, 30, Fish.TROUT)

    def test_idempotent(self, sheets_client, winter_clock):
        first = get(sheets_client, Program.WINTER, clock=winter_clock)
        second = get(sheets_client, Program.WINTER, clock=winter_clock)
        assert first == second

    def test_bad_row_is_logged_and_left_out(self, sheets_client, winter_clock, caplog):
        with caplog.at_level(logging.WARNING):
            stocking_data = get(sheets_client, Program.WINTER, clock=winter_clock)

        assert "TOO MANY COLUMNS" not in stocking_data.water_names()
        assert "TOO MANY COLUMNS" in caplog.text

    def test_program_by_name(self, sheets_client, winter_clock):
        schedule = StockingSchedule(sheets_client, clock=winter_clock)
        assert schedule.get("WINTER") == schedule.get(Program.WINTER)


class TestGetErrors:
    def test_unknown_program(self, sheets_client):
        with pytest.raises(UnknownProgramError):
            get(sheets_client, "fall")
        assert sheets_client.requests == []

    def test_date_fetch_failure(self, ranges, winter_clock):
        sheet = SHEETS[Program.WINTER]
        errors = {(sheet.spreadsheet_id, f"{sheet.sheet_name}!{sheet.date_range}"): SheetError("boom")}
        client = FakeSheetsClient(ranges, errors)

        with pytest.raises(CalendarError, match="boom") as exc_info:
            get(client, Program.WINTER, clock=winter_clock)
        assert isinstance(exc_info.value.__cause__, SheetError)
        assert len(client.requests) == 1

    def test_bad_date_header(self, ranges, winter_clock):
        sheet = SHEETS[Program.WINTER]
        ranges[(sheet.spreadsheet_id, f"{sheet.sheet_name}!{sheet.date_range}")] = [["OCTOBER"]]
        client = FakeSheetsClient(ranges)

        with pytest.raises(CalendarError, match="expected 2 rows"):
            get(client, Program.WINTER, clock=winter_clock)

    def test_schedule_fetch_failure(self, ranges, winter_clock):
        sheet = SHEETS[Program.WINTER]
        errors = {(sheet.spreadsheet_id, f"{sheet.sheet_name}!{sheet.schedule_range}"): SheetError("quota")}
        client = FakeSheetsClient(ranges, errors)

        with pytest.raises(ScheduleError, match="quota"):
            get(client, Program.WINTER, clock=winter_clock)
