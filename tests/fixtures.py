"""Sheet contents shared by the tests, shaped like the raw Sheets API values"""
import copy

from azstocker.stocking.programs import SHEETS


# Winter sheet: October 2024 through March 2025 with a deleted column at index 5
WINTER_MONTHS = [
    "OCTOBER", "", "", "", "", "",
    "NOVEMBER", "", "", "",
    "DECEMBER", "", "", "", "",
    "JANUARY", "", "", "",
    "FEBRUARY", "", "", "",
    "MARCH",
]
WINTER_DAYS = [
    "1", "7", "14", "21", "28", "",
    "4", "11", "18", "25",
    "2", "9", "16", "23", "30",
    "6", "13", "20", "27",
    "3", "10", "17", "24",
    "3", "10", "17", "24", "31",
]
WINTER_WEEKS = 27

# March 31 is empty and trimmed from the raw data
SALT_RIVER_ROW = [
    "LOWER SALT RIVER",
    "X", "", "X", "X", "X", "",
    "X", "X", "X", "X",
    "X", "X", "X", "X", "",
    "X", "X", "X", "X",
    "X", "X", "X", "X",
    "X", "X", "X", "X",
]

WINTER_SCHEDULE = [
    ["Phoenix Metro", ""],
    SALT_RIVER_ROW,
    ["   ", "X", "X"],
    ["ROOSEVELT LAKE"],
    ["GREEN VALLEY LAKE", "c", "", "", "", "", "", "C"],
    ["TOO MANY COLUMNS"] + ["X"] * 30,
]

# CFP sheet: day cells are week ranges
CFP_MONTHS = ["OCTOBER", "", "", "", "NOVEMBER", "", "", "", "DECEMBER"]
CFP_DAYS = [
    "7-11", "14-18", "21-25", "28-1",
    "4-8", "11-15", "18-22", "25-29",
    "2-6", "9-13", "16-20", "23-27", "30-3",
]
CFP_WEEKS = 13

CFP_SCHEDULE = [
    ["Tempe - Kiwanis Lake", "F", "", "C", "", "C", "", "", "", "", "X", "", "", "X"],
    ["Payson - Green Valley Lakes", "", "T", "", "T", "", "", "T", "", "T", "", "T"],
    ["Tempe - Tempe Town Lake", "", "", "", "C"],
    ["Phoenix - Roadrunner Pond", "", "", "c", "", "", "", "", "", "", "", "", "", ""],
]


class FakeSheetsClient:
    """In-memory stand-in for GoogleSheetsClient that records every request"""

    def __init__(self, ranges, errors=None):
        self.ranges = ranges
        self.errors = errors or {}
        self.requests = []

    def get_range(self, spreadsheet_id, sheet_name, a1_range):
        self.requests.append((spreadsheet_id, sheet_name, a1_range))
        key = (spreadsheet_id, f"{sheet_name}!{a1_range}")
        if key in self.errors:
            raise self.errors[key]
        return copy.deepcopy(self.ranges.get(key, []))


def sheet_ranges(program, dates, schedule):
    sheet = SHEETS[program]
    return {
        (sheet.spreadsheet_id, f"{sheet.sheet_name}!{sheet.date_range}"): dates,
        (sheet.spreadsheet_id, f"{sheet.sheet_name}!{sheet.schedule_range}"): schedule,
    }


