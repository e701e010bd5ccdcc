"""Date formats shared by the parser and the storage codec."""

import re
from datetime import datetime

# Accepted input forms, tried in order: (shape the text must have, strptime format, two-digit year)
INPUT_FORMATS: tuple[tuple[re.Pattern, str, bool], ...] = (
    (re.compile(r"\d{1,2}/\d{1,2}/\d{4} \d{4}"), "%d/%m/%Y %H%M", False),  # d/M/yyyy HHmm
    (re.compile(r"\d{1,2} [A-Za-z]{3} \d{2} \d{4}"), "%d %b %y %H%M", True),  # d MMM yy HHmm
    (re.compile(r"\d{2}-\d{2}-\d{2} \d{4}"), "%d-%m-%y %H%M", True),  # dd-MM-yy HHmm
)
INPUT_FORMATS_HELP = "d/M/yyyy HHmm, d MMM yy HHmm, dd-MM-yy HHmm"


def parse_datetime(text: str) -> datetime | None:
    """
    Parse text against each accepted format. First match wins, None if none match.

    Two-digit years always fall in 2000-2099.
    """
    text = text.strip()
    for shape, fmt, two_digit_year in INPUT_FORMATS:
        if not shape.fullmatch(text):
            continue
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if two_digit_year and parsed.year < 2000:
            # strptime puts 69-99 in the 1900s
            parsed = parsed.replace(year=parsed.year + 100)
        return parsed
    return None


def format_stored(dt: datetime) -> str:
    """Canonical storage form, e.g. '2/12/2019 1800'."""
    return f"{dt.day}/{dt.month}/{dt.year} {dt.strftime('%H%M')}"


def format_display(dt: datetime) -> str:
    """Display form, e.g. '02 Dec 2019, 6:00 pm'."""
    hour = dt.hour % 12 or 12
    meridiem = "am" if dt.hour < 12 else "pm"
    return f"{dt.strftime('%d %b %Y')}, {hour}:{dt.strftime('%M')} {meridiem}"
