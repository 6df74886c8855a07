"""Check that a torikumi page really is the day that was requested.

The site answers every day URL, but before a day is published it serves the
latest available day instead. Each page carries its own metadata:

- ``<input type="hidden" id="day" value="N">``: tournament day number
- ``#dayHead``: calendar date, e.g. ``令和7年9月16日``
- ``.mdDate``: basho and day name, e.g. ``令和七年九月場所:三日目``
"""

import logging
import re
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from bs4 import BeautifulSoup

from sumocli.models import ValidationResult

logger = logging.getLogger(__name__)

JST = ZoneInfo("Asia/Tokyo")
REIWA_EPOCH_YEAR = 2018  # Reiwa 1 == 2019

_REIWA_DATE_PATTERN = re.compile(r"令和(\d+)年(\d+)月(\d+)日")
_DAY_NAME_PATTERN = re.compile(r"場所[:：]\s*(\S+)")

DAY_NAMES = {
    1: "初日",
    2: "二日目",
    3: "三日目",
    4: "四日目",
    5: "五日目",
    6: "六日目",
    7: "七日目",
    8: "中日",
    9: "九日目",
    10: "十日目",
    11: "十一日目",
    12: "十二日目",
    13: "十三日目",
    14: "十四日目",
    15: "千秋楽",
}


def jst_today() -> date:
    return datetime.now(JST).date()


def tournament_start_date(year: int, month: int) -> date | None:
    """Honbasho open on the second Sunday of odd months."""
    if month % 2 == 0:
        return None
    first = date(year, month, 1)
    first_sunday = first + timedelta(days=(6 - first.weekday()) % 7)
    return first_sunday + timedelta(days=7)


def is_day_available(requested_day: int, actual_date: date | None) -> bool:
    """Whether the requested day should be published as of ``actual_date``.

    Matchups are announced the day before, so one day ahead is allowed.
    """
    if actual_date is None:
        return False
    start = tournament_start_date(actual_date.year, actual_date.month)
    if start is None:
        return False
    days_since_start = (actual_date - start).days + 1
    return requested_day <= days_since_start + 1


def _extract_day(soup: BeautifulSoup) -> int | None:
    tag = soup.find(id="day")
    if tag is None:
        return None
    value = tag.get("value")
    if value is None:
        value = tag.get_text(strip=True)
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _extract_date(soup: BeautifulSoup) -> date | None:
    head = soup.find(id="dayHead")
    if head is None:
        return None
    m = _REIWA_DATE_PATTERN.search(head.get_text(strip=True))
    if not m:
        return None
    try:
        return date(REIWA_EPOCH_YEAR + int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None


def _extract_day_name(soup: BeautifulSoup) -> str | None:
    tag = soup.find(class_="mdDate")
    if tag is None:
        return None
    m = _DAY_NAME_PATTERN.search(tag.get_text(strip=True))
    return m.group(1) if m else None


def validate_html_date(
    html: str,
    requested_day: int,
    today: date | None = None,
) -> ValidationResult:
    """Compare a page's embedded day metadata with the requested day.

    Every problem found adds its own warning. A page with no day number at
    all is rejected: absence of metadata is reported separately from a
    mismatch so callers can tell the two apart.
    """
    soup = BeautifulSoup(html, "html.parser")
    warnings: list[str] = []

    actual_day = _extract_day(soup)
    actual_date = _extract_date(soup)
    day_name = _extract_day_name(soup)

    if actual_day is None:
        warnings.append(f"No day metadata found in HTML (requested day {requested_day})")
    elif actual_day != requested_day:
        if is_day_available(requested_day, actual_date):
            availability = "data should be available"
        else:
            availability = "data not yet available"
        warnings.append(
            f"Requested day {requested_day} but HTML contains day {actual_day}"
            f" - {availability}"
        )

    # A lagging day label is tolerated when the day number itself matches
    if day_name is not None and actual_day is not None and actual_day != requested_day:
        expected_name = DAY_NAMES.get(actual_day)
        if expected_name is not None and day_name != expected_name:
            warnings.append(
                f'Day {actual_day} should be "{expected_name}" but HTML shows "{day_name}"'
            )

    if actual_date is not None:
        current = today or jst_today()
        if actual_date > current + timedelta(days=1):
            warnings.append(
                f"HTML date {actual_date.isoformat()} is too far in the future"
                f" (current JST: {current.isoformat()})"
            )

    is_valid = actual_day == requested_day and not warnings
    if is_valid:
        logger.debug("HTML date validation passed for day %d", requested_day)

    return ValidationResult(
        is_valid=is_valid,
        actual_day=actual_day,
        actual_date=actual_date,
        warnings=warnings,
    )
