"""Torikumi (daily matchup) page parser."""

import logging
import re

from bs4 import BeautifulSoup, Tag

from sumocli.banzuke import sort_banzuke
from sumocli.models import Bout, Rikishi, RikishiRecord
from sumocli.ranks import normalize_rank, to_banzuke_slot

logger = logging.getLogger(__name__)

_RECORD_WITH_REST = re.compile(r"[（(](\d+)勝(\d+)敗(\d+)休[）)]")
_RECORD = re.compile(r"[（(](\d+)勝(\d+)敗[）)]")
KIMARITE_SUFFIX = "取組解説"


def parse_record(text: str) -> RikishiRecord:
    """Parse ``（6勝2敗）`` or ``（1勝0敗3休）``.

    Anything else yields 0-0 with no rest field.
    """
    m = _RECORD_WITH_REST.search(text)
    if m:
        return RikishiRecord(
            wins=int(m.group(1)), losses=int(m.group(2)), rest=int(m.group(3)),
        )
    m = _RECORD.search(text)
    if m:
        return RikishiRecord(wins=int(m.group(1)), losses=int(m.group(2)))
    if text:
        logger.debug("Unrecognised record text: %r", text)
    return RikishiRecord(wins=0, losses=0)


def parse_torikumi_page(html: str, division: str) -> list[Bout]:
    """Parse a torikumi page into Bouts.

    Returns an empty list when the page has no torikumi table.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = soup.find("table", id="torikumi_table")
    if table is None:
        logger.warning("No torikumi table found (%s)", division)
        return []

    bouts: list[Bout] = []
    for row_index, tr in enumerate(table.find_all("tr")):
        cells = tr.find_all("td", recursive=False)
        # Header row uses <th> only
        if len(cells) < 2:
            continue

        east = _parse_rikishi(cells[0], "East", division)
        west = _parse_rikishi(cells[-1], "West", division)
        if not east.shikona or not west.shikona:
            logger.warning("Skipping row %d in %s: missing shikona", row_index, division)
            continue

        has_result = tr.find("img", src=re.compile(r"result_ic")) is not None
        east.result = _detect_result(cells[0], has_result)
        west.result = _detect_result(cells[-1], has_result)
        technique = _extract_technique(tr)
        if east.result == "W":
            east.technique = technique
        elif west.result == "W":
            west.technique = technique

        bouts.append(Bout(division=division, east=east, west=west))
        logger.debug(
            "  bout %s: %s (%s) vs %s (%s) -> %s/%s %s",
            division, east.shikona, east.rank_text, west.shikona,
            west.rank_text, east.result, west.result, technique,
        )

    logger.info("Parsed %d bouts (%s)", len(bouts), division)
    return bouts


def _parse_rikishi(cell: Tag, side: str, division: str) -> Rikishi:
    rank_text = _text(cell, ".rank")
    rank = normalize_rank(rank_text)
    slot = to_banzuke_slot(rank, side, division)
    if slot is None and rank_text:
        logger.warning("Could not place rank %r on banzuke (%s)", rank_text, division)

    return Rikishi(
        shikona=_text(cell, ".name span") or _text(cell, ".name"),
        rank_text=rank_text,
        rank=rank,
        slot=slot,
        record=parse_record(_text(cell, ".perform")),
        result="",
    )


def _text(cell: Tag, selector: str) -> str:
    tag = cell.select_one(selector)
    return tag.get_text(strip=True) if tag else ""


def _detect_result(cell: Tag, has_result: bool) -> str:
    """W for the cell marked as winner, L for the other once the bout is decided."""
    if "win" in cell.get("class", []):
        return "W"
    if has_result:
        return "L"
    return ""


def _extract_technique(tr: Tag) -> str:
    link = tr.select_one("td.decide a.technic")
    if not link:
        return ""
    return link.get_text(strip=True).replace(KIMARITE_SUFFIX, "").strip()


def roster(bouts: list[Bout]) -> list[Rikishi]:
    """Every rikishi on the card, in banzuke order; unplaced ranks last."""
    everyone = [r for bout in bouts for r in (bout.east, bout.west)]
    return sort_banzuke(everyone, slot_of=lambda r: r.slot)
