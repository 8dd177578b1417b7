# azstocker/main.py
import argparse
import logging
import sys

import uvicorn

from azstocker.api import dependencies
from azstocker.api.main import app
from azstocker.config import load_config
from azstocker.logging.logging_config import setup_logging
from azstocker.sheets.client import GoogleSheetsClient, SheetError
from azstocker.stocking.errors import StockingError
from azstocker.stocking.models import Program
from azstocker.stocking.schedule import StockingSchedule


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="azstocker", description="Read the AZ GFD fish stocking schedule"
    )
    parser.add_argument("--api-key", help="Google API key to access Sheets (env: API_KEY)")
    parser.add_argument(
        "--credentials-path", help="service account file used instead of an API key (env: CREDENTIALS_PATH)"
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logs")

    subparsers = parser.add_subparsers(dest="command")

    get_parser = subparsers.add_parser("get", help="get info from the AZ GFD fish stocking schedule")
    get_parser.add_argument(
        "-p",
        "--program",
        required=True,
        help="fishing program to search (CFP, Spring/Summer, or Winter)",
    )
    get_parser.add_argument(
        "-w", "--waters", action="append", default=[], help="water to show, can be repeated"
    )
    get_parser.add_argument("--next", action="store_true", help="show next stocking time")
    get_parser.add_argument("--last", action="store_true", help="show recently-passed stocking time")
    get_parser.add_argument(
        "--all-stock", action="store_true", help="show all stocking times in the schedule"
    )
    get_parser.add_argument(
        "--all", action="store_true", help="show full stocking schedule (include empty weeks)"
    )

    server_parser = subparsers.add_parser(
        "server", help="run an HTTP server that responds with the AZ GFD fish stocking schedule"
    )
    server_parser.add_argument("--host", default="0.0.0.0", help="address to serve on")
    server_parser.add_argument("--port", type=int, default=8080, help="port to serve on")
    server_parser.add_argument("--url-base", help="public URL base used in the sitemap (env: URL_BASE)")

    return parser


def run_get(args: argparse.Namespace, sheets_client) -> int:
    try:
        program = Program.parse(args.program)
        stocking_data = StockingSchedule(sheets_client).get(program, args.waters)
    except StockingError as e:
        print(f"error getting stocking data: {e}", file=sys.stderr)
        return 1

    for calendar in stocking_data:
        print(calendar.water_name)
        print(calendar.detail_format(args.all, args.all_stock, args.next, args.last))
    return 0


def run_server(args: argparse.Namespace, config: dict, sheets_client) -> int:
    if args.url_base:
        config = {**config, "URL_BASE": args.url_base.rstrip("/")}
    dependencies.configure(config, sheets_client)

    logger.info(f"Starting server on {args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port, log_config=None)
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else list(argv)
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args([*argv, "server"])

    try:
        config = load_config(api_key=args.api_key, credentials_path=args.credentials_path)
    except EnvironmentError as e:
        print(str(e), file=sys.stderr)
        return 1

    setup_logging(level="DEBUG" if args.debug else config["LOG_LEVEL"])

    try:
        sheets_client = GoogleSheetsClient(
            api_key=config["API_KEY"],
            credentials_path=config["CREDENTIALS_PATH"],
        )
    except SheetError as e:
        print(f"error creating Sheets service: {e}", file=sys.stderr)
        return 1

    if args.command == "server":
        return run_server(args, config, sheets_client)
    return run_get(args, sheets_client)


if __name__ == "__main__":
    sys.exit(main())
