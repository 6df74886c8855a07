"""Shared pytest fixtures for loading HTML test fixtures."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture()
def torikumi_day3_html() -> str:
    return (FIXTURES_DIR / "torikumi_day3.html").read_text(encoding="utf-8")


@pytest.fixture()
def torikumi_no_table_html() -> str:
    return (FIXTURES_DIR / "torikumi_no_table.html").read_text(encoding="utf-8")


@pytest.fixture()
def hoshitori_makuuchi_html() -> str:
    return (FIXTURES_DIR / "hoshitori_makuuchi.html").read_text(encoding="utf-8")


def _day_page(day: int | None, date_text: str = "", day_name: str = "") -> str:
    parts = ["<html><body>"]
    if day is not None:
        parts.append(f'<input type="hidden" id="day" value="{day}">')
    if day_name:
        parts.append(f'<div class="mdDate">令和七年九月場所:{day_name}</div>')
    if date_text:
        parts.append(f'<div id="dayHead">{date_text}</div>')
    parts.append("</body></html>")
    return "\n".join(parts)


@pytest.fixture()
def day_page():
    """Factory for minimal pages carrying only the day metadata fields."""
    return _day_page

