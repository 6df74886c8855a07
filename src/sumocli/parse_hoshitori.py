"""Hoshitori (whole-basho win/loss table) page parser."""

import logging

from bs4 import BeautifulSoup, Tag

from sumocli.banzuke import sort_banzuke
from sumocli.models import SIDES, Rikishi
from sumocli.parse_torikumi import parse_record
from sumocli.ranks import normalize_rank, to_banzuke_slot

logger = logging.getLogger(__name__)


def parse_hoshitori_page(html: str, division: str) -> list[Rikishi]:
    """Parse the ``#ew_table_sm`` table into Rikishi in banzuke order.

    Each row is ``east box | rank | west box``; either box may be missing.
    Returns an empty list when the page has no table.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = soup.find("table", id="ew_table_sm")
    if table is None:
        logger.warning("No hoshitori table found (%s)", division)
        return []

    rikishi: list[Rikishi] = []
    for tr in table.find_all("tr"):
        cells = tr.find_all(["td", "th"], recursive=False)
        if len(cells) != 3:
            continue

        rank_text = cells[1].get_text(strip=True)
        for cell, side in zip((cells[0], cells[2]), SIDES):
            box = cell.find("div", class_="box")
            if box is None:
                continue
            r = _parse_box(box, rank_text, side, division)
            if not r.shikona:
                logger.warning("Skipping %s %s box in %s: missing shikona", rank_text, side, division)
                continue
            rikishi.append(r)

    logger.info("Parsed %d rikishi (%s)", len(rikishi), division)
    return sort_banzuke(rikishi, slot_of=lambda r: r.slot)


def _parse_box(box: Tag, rank_text: str, side: str, division: str) -> Rikishi:
    rank = normalize_rank(rank_text)
    slot = to_banzuke_slot(rank, side, division)
    if slot is None and rank_text:
        logger.warning("Could not place rank %r on banzuke (%s)", rank_text, division)

    link = box.find("a")
    shikona = ""
    if link is not None:
        name = link.find("span")
        shikona = (name or link).get_text(strip=True)

    # The table prints bare "7勝1敗"
    record_tag = box.find("p")
    record_text = record_tag.get_text(strip=True) if record_tag else ""
    record = parse_record(f"（{record_text}）" if record_text else "")

    return Rikishi(
        shikona=shikona,
        rank_text=rank_text,
        rank=rank,
        slot=slot,
        record=record,
        result="",
    )
