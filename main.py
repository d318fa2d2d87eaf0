import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from hurricane.constants import MONTH_NAMES
from hurricane.data_provider.file_provider import provider_for
from hurricane.errors import HurricaneDataError
from hurricane.hurricane_service import HurricaneService
from hurricane.logger import setup_logging
from hurricane.transformers import summary_to_frames

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NOT_FOUND = 3

FETCH_FAILED = "Failed to fetch hurricanes data. Please try again."


def _print_json(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2))


def run_all(service: HurricaneService, as_table: bool = False) -> int:
    try:
        summary = service.get_summary()
    except HurricaneDataError:
        _print_json({"success": False, "message": FETCH_FAILED, "data": {}})
        return EXIT_FAILED

    if as_table:
        years_df, months_df = summary_to_frames(summary)
        print("Hurricanes per year:")
        print(years_df.to_string(index=False))
        print("\nHurricanes per month:")
        print(months_df.to_string(index=False))
    else:
        _print_json({
            "success": True,
            "message": "Hurricanes data fetched successfully",
            "data": summary.to_dict(),
        })
    return EXIT_OK


def run_expect(service: HurricaneService, month: str) -> int:
    possibility = service.hurricane_possibility(month)
    if possibility is None:
        _print_json({
            "success": False,
            "message": f"Could not predict hurricanes for {month}. Not enough data.",
        })
        return EXIT_NOT_FOUND

    _print_json({
        "success": True,
        "message": f"Possibility of hurricanes in {month} ~ {possibility}%",
        "data": {"possibility": possibility},
    })
    return EXIT_OK


def run_outlook(service: HurricaneService) -> int:
    try:
        outlook = service.get_outlook()
    except HurricaneDataError:
        _print_json({"success": False, "message": FETCH_FAILED, "data": {}})
        return EXIT_FAILED

    _print_json({"success": True, "message": "Hurricanes outlook computed successfully", "data": outlook})
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Historical hurricane statistics and monthly possibility.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--url", help="Sheet URL (defaults to SHEET_URL or the public hurricanes sheet)")
    source.add_argument("--file", help="Read the sheet from a local CSV file instead")
    parser.add_argument("--log-level", default=None, help="Logging level (defaults to LOG_LEVEL or INFO)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    all_parser = subparsers.add_parser("all", help="Hurricane totals per year and per month")
    all_parser.add_argument("--table", action="store_true", help="Print tables instead of JSON")

    expect_parser = subparsers.add_parser("expect", help="Possibility of hurricanes in a month")
    expect_parser.add_argument("month", choices=MONTH_NAMES, help="Month abbreviation (e.g., Jan, Feb)")

    subparsers.add_parser("outlook", help="Possibility of hurricanes for every month")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    service = HurricaneService(provider_for(args.file or args.url))

    if args.command == "all":
        return run_all(service, as_table=args.table)
    if args.command == "expect":
        return run_expect(service, args.month)
    return run_outlook(service)


if __name__ == "__main__":
    sys.exit(main())
