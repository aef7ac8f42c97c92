"""Daily-note title normalization.

Roam names daily pages like "January 5th, 2024". Obsidian's daily notes
use sortable ISO dates, so both the page titles and the ``[[...]]`` links
pointing at them are rewritten to "2024-01-05".
"""

import re
from datetime import date

from roam2obsidian.models.export import RoamPage
from roam2obsidian.services.exceptions import DateParseError

_MONTHS = (
    "January|February|March|April|May|June|July|"
    "August|September|October|November|December"
)
_MONTH_NUMBERS = {name: number for number, name in enumerate(_MONTHS.split("|"), start=1)}

# Month, day, two-letter ordinal suffix, 4-digit year
_DATE_BODY = rf"({_MONTHS}) ([0-9]+)[a-z]{{2}}, ([0-9]{{4}})"

# Matched with fullmatch so a trailing newline is not accepted
DAILY_TITLE_RE = re.compile(_DATE_BODY)
DAY_LINK_RE = re.compile(rf"\[\[((?:{_MONTHS}) [0-9]+[a-z]{{2}}, [0-9]{{4}})\]\]")

DAILY_FORMAT = "%Y-%m-%d"


def parse_roam_date(text: str) -> date:
    """Parse a Roam daily title into a date.

    Args:
        text: Title in Roam's daily format, e.g. "January 5th, 2024"

    Returns:
        The calendar date

    Raises:
        DateParseError: If text is not in the daily format or is not a real date
    """
    match = DAILY_TITLE_RE.fullmatch(text)
    if match is None:
        raise DateParseError(text, "not a daily note title")

    month, day, year = match.groups()
    if len(day) > 2:
        raise DateParseError(text, "day must have one or two digits")
    try:
        return date(int(year), _MONTH_NUMBERS[month], int(day))
    except ValueError as e:
        raise DateParseError(text, str(e)) from e


def normalize_title(title: str) -> tuple[str, bool]:
    """Convert a daily-note title to YYYY-MM-DD.

    Args:
        title: Page title

    Returns:
        Tuple of (title, is_daily). Titles that are not daily notes come
        back unchanged with is_daily False.

    Raises:
        DateParseError: If the title looks like a daily note but names an
            impossible date (e.g. "February 30th, 2024")

    Examples:
        >>> normalize_title("January 5th, 2024")
        ('2024-01-05', True)
        >>> normalize_title("Reading list")
        ('Reading list', False)
    """
    if DAILY_TITLE_RE.fullmatch(title) is None:
        return title, False

    return parse_roam_date(title).strftime(DAILY_FORMAT), True


def normalize_page(page: RoamPage) -> None:
    """Rewrite a page's title in place if it is a daily note."""
    title, is_daily = normalize_title(page.title)
    page.title = title
    if is_daily:
        page.is_daily = True


def rewrite_date_links(text: str) -> str:
    """Rewrite ``[[January 5th, 2024]]`` links to ``[[2024-01-05]]``.

    Raises:
        DateParseError: If a date link names an impossible date
    """

    def replace(match: re.Match) -> str:
        normalized, _ = normalize_title(match.group(1))
        return f"[[{normalized}]]"

    return DAY_LINK_RE.sub(replace, text)
