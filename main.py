"""Entry point — prints or exports a year of month grids."""

import argparse
import json
import logging
from datetime import date

from calendar_logic import DAY_ABBR, Calendar, Month, build_calendar
from events import events_to_specs, parse_event_text
from holidays import sample_holidays
from settings import load_settings
from sheet import save_sheets

logger = logging.getLogger(__name__)


def format_month(month: Month, year: int) -> str:
    """Plain-text grid; padding days in parentheses, events listed below."""
    lines = [f"{month.name} {year}".center(7 * 5 - 1), " ".join(f"{a:>4}" for a in DAY_ABBR)]
    for week in month.weeks:
        cells = [f"{d.date:>4}" if d.this_month else f"({d.date:>2})" for d in week]
        lines.append(" ".join(cells))
    for day in month.in_month_days():
        if day.event:
            lines.append(f"  {month.name[:3]} {day.date}: {day.event}")
    return "\n".join(lines)


def format_calendar(cal: Calendar) -> str:
    return "\n\n".join(format_month(m, cal.year) for m in cal.months)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Month-grid calendar generator")
    parser.add_argument("--year", type=int, default=date.today().year)
    parser.add_argument("--events", type=str, default=None,
                        help="text file with 'Mmm d: description' lines")
    parser.add_argument("--sample", action="store_true",
                        help="print the sample holiday list and exit")
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--png", type=str, default=None, metavar="DIR",
                        help="write one PNG sheet per month into DIR")
    parser.add_argument("--config", type=str, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.sample:
        print(sample_holidays(args.year))
        return

    if args.events:
        try:
            with open(args.events, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as exc:
            parser.error(f"cannot read events file: {exc}")
    else:
        text = sample_holidays(args.year)

    parsed = parse_event_text(text, args.year)
    logger.debug("Parsed %d event dates", len(parsed))
    cal = build_calendar(args.year, events_to_specs(parsed))

    if args.png:
        for path in save_sheets(cal, args.png, load_settings(args.config)):
            print(path)
    elif args.json:
        print(json.dumps(cal.to_dict(), indent=2))
    else:
        print(format_calendar(cal))


if __name__ == "__main__":
    main()
