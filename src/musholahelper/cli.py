"""Command-line interface for the mushola Ramadan scheduling tool."""

import argparse
import logging
import sys
from typing import Optional

from musholahelper.config import AppConfig, configure_logging
from musholahelper.domain.calendar import ramadan_dates, ramadan_start_date, weekday_name
from musholahelper.domain.models import (
    SnackProviderYearlySchedule,
    TadarusYearlySchedule,
    TarawihYearlySchedule,
)
from musholahelper.output.pdf_generator import PDFGenerator
from musholahelper.output.report_generator import ReportGenerator
from musholahelper.scheduling.book import SnackProviderBook, TadarusBook, TarawihBook
from musholahelper.scheduling.snack import default_providers
from musholahelper.scheduling.tarawih import default_roster
from musholahelper.store.memory import InMemoryScheduleStore
from musholahelper.validation.validator import ScheduleValidator, ValidationResult

logger = logging.getLogger(__name__)


def open_book(book_cls, config: AppConfig):
    """Book on an in-memory store with the configured years preloaded."""
    book = book_cls(InMemoryScheduleStore(book_cls.name), config.ramadan_start_dates)
    book.load(config.preload_years)
    return book


def build_tarawih_demo(config: AppConfig, year: int) -> TarawihYearlySchedule:
    """Tarawih schedule with the sample roster and a generated month."""
    book = open_book(TarawihBook, config)
    for person in default_roster():
        book.add_person(year, person)
    return book.generate_schedule(year)


def build_tadarus_demo(config: AppConfig, year: int) -> TadarusYearlySchedule:
    """Tadarus log with sample reports for the first two weeks."""
    book = open_book(TadarusBook, config)
    for day in range(1, 15):
        book.add_daily_entry(year, day, 1 + day % 3, 1 + day % 2, "Admin")
        if day % 4 == 0:
            # Second report on the same evening accumulates
            book.add_daily_entry(year, day, 1, 0, "Takmir")
    return book.get_schedule_for_year(year)


def build_snack_demo(config: AppConfig, year: int) -> SnackProviderYearlySchedule:
    """Snack rota with the sample providers spread over all weeks."""
    book = open_book(SnackProviderBook, config)
    providers = default_providers()
    for provider in providers:
        book.add_provider(year, provider)

    schedule = book.get_schedule_for_year(year)
    index = 0
    for week in sorted(schedule.weekly_schedules):
        for day in schedule.weekly_schedules[week]:
            book.assign_provider(year, week, day.day, 1, providers[index % len(providers)])
            book.assign_provider(year, week, day.day, 2, providers[(index + 1) % len(providers)])
            index += 2
    return book.get_schedule_for_year(year)


def print_validation(result: ValidationResult) -> None:
    if result.is_valid:
        print("\n  Validation: PASSED")
    else:
        print(f"\n  Validation: FAILED ({len(result.errors)} errors)")
        for error in result.errors[:5]:
            print(f"    - {error}")
        if len(result.errors) > 5:
            print(f"    ... and {len(result.errors) - 5} more errors")
    for warning in result.warnings[:5]:
        print(f"    ! {warning}")


def run_calendar(config: AppConfig, year: int) -> None:
    start = ramadan_start_date(year, config.ramadan_start_dates)
    print(f"Ramadan {year} starts {start} ({weekday_name(start)})")
    for day, d in enumerate(ramadan_dates(year, config.ramadan_start_dates), 1):
        print(f"  {day:>2}  {d}  {weekday_name(d)}")


def run_tarawih_demo(config: AppConfig, year: int, output_path: Optional[str] = None) -> None:
    print(f"Generating tarawih schedule for {year}...")
    schedule = build_tarawih_demo(config, year)
    print(ReportGenerator().generate_to_string(tarawih=schedule))
    print_validation(ScheduleValidator().validate_tarawih(schedule))

    if output_path:
        print(f"\nGenerating PDF: {output_path}")
        PDFGenerator().generate(output_path, tarawih=schedule)
        print("  PDF created successfully!")


def run_tadarus_demo(config: AppConfig, year: int) -> None:
    print(f"Recording sample tadarus reports for {year}...")
    schedule = build_tadarus_demo(config, year)
    print(ReportGenerator().generate_to_string(tadarus=schedule))
    print_validation(ScheduleValidator().validate_tadarus(schedule))


def run_snack_demo(config: AppConfig, year: int) -> None:
    print(f"Assigning sample snack providers for {year}...")
    schedule = build_snack_demo(config, year)
    print(ReportGenerator().generate_to_string(snack=schedule))
    print_validation(ScheduleValidator().validate_snack(schedule))


def run_report(config: AppConfig, year: int, output_path: Optional[str] = None) -> None:
    tarawih = build_tarawih_demo(config, year)
    tadarus = build_tadarus_demo(config, year)
    snack = build_snack_demo(config, year)

    if output_path and output_path.lower().endswith(".pdf"):
        PDFGenerator().generate(output_path, tarawih=tarawih, tadarus=tadarus, snack=snack)
        print(f"PDF report written to {output_path}")
    elif output_path:
        ReportGenerator().generate(output_path, tarawih=tarawih, tadarus=tadarus, snack=snack)
        print(f"Text report written to {output_path}")
    else:
        print(ReportGenerator().generate_to_string(tarawih, tadarus, snack))


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Mushola Helper - Ramadan scheduling tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s calendar 2026                 Show the 30 Ramadan dates of 2026
  %(prog)s tarawih-demo                  Generate the sample imam/bilal roster
  %(prog)s tarawih-demo -o tarawih.pdf   Also write a PDF
  %(prog)s tadarus-demo --year 2026      Sample tadarus progress
  %(prog)s snack-demo                    Sample snack provider weeks
  %(prog)s report -o ramadan.pdf         Full report as PDF (or .txt)
        """,
    )
    parser.add_argument("--config", type=str, help="JSON configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    calendar_parser = subparsers.add_parser("calendar", help="Show Ramadan dates for a year")
    calendar_parser.add_argument("year", type=int, help="Ramadan year (e.g. 2025)")

    tarawih_parser = subparsers.add_parser("tarawih-demo", help="Generate a sample tarawih roster")
    tarawih_parser.add_argument("--year", "-y", type=int, help="Ramadan year (default: from config)")
    tarawih_parser.add_argument("--output", "-o", type=str, help="Output PDF file path")

    tadarus_parser = subparsers.add_parser("tadarus-demo", help="Show sample tadarus progress")
    tadarus_parser.add_argument("--year", "-y", type=int, help="Ramadan year (default: from config)")

    snack_parser = subparsers.add_parser("snack-demo", help="Show sample snack provider weeks")
    snack_parser.add_argument("--year", "-y", type=int, help="Ramadan year (default: from config)")

    report_parser = subparsers.add_parser("report", help="Full sample report for a year")
    report_parser.add_argument("--year", "-y", type=int, help="Ramadan year (default: from config)")
    report_parser.add_argument("--output", "-o", type=str, help="Output .pdf or text file path")

    args = parser.parse_args(argv)

    config = AppConfig.from_json(args.config) if args.config else AppConfig()
    configure_logging("DEBUG" if args.verbose else config.log_level)
    year = getattr(args, "year", None) or config.default_year
    logger.debug("Running %s for %s", args.command, year)

    if args.command == "calendar":
        run_calendar(config, args.year)
        return 0
    elif args.command == "tarawih-demo":
        run_tarawih_demo(config, year, args.output)
        return 0
    elif args.command == "tadarus-demo":
        run_tadarus_demo(config, year)
        return 0
    elif args.command == "snack-demo":
        run_snack_demo(config, year)
        return 0
    elif args.command == "report":
        run_report(config, year, args.output)
        return 0
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
