"""Rank text normalization.

Rank cells on sumo.or.jp read like ``横綱``, ``前頭十八枚目`` or ``十両筆頭``:
a tier name optionally followed by a position in native numerals.
"""

import logging

from sumocli.japanese import kanji_to_number
from sumocli.models import (
    DIVISIONS,
    SANYAKU,
    BanzukeSlot,
    NamedRank,
    NumberedRank,
    ParsedRank,
)

logger = logging.getLogger(__name__)

HITTOU = "筆頭"  # first position
MAIME = "枚目"  # position suffix

RANK_TIERS_JP = {
    "横綱": "Yokozuna",
    "大関": "Ozeki",
    "関脇": "Sekiwake",
    "小結": "Komusubi",
    "前頭": "Maegashira",
    "十両": "Juryo",
    "幕下": "Makushita",
    "三段目": "Sandanme",
    "序二段": "Jonidan",
    "序ノ口": "Jonokuchi",
}

# Longest first so a longer tier name always wins over a shorter prefix
_TIERS_BY_LENGTH = sorted(RANK_TIERS_JP.items(), key=lambda kv: len(kv[0]), reverse=True)


def parse_position(text: str) -> int | None:
    """Parse ``筆頭``, ``X枚目`` or a bare numeral into a positive int."""
    text = text.strip()
    if text == HITTOU:
        return 1
    if text.endswith(MAIME):
        text = text[: -len(MAIME)]
    number = kanji_to_number(text)
    if number is None or number <= 0:
        return None
    return number


def normalize_rank(text: str) -> ParsedRank:
    """Split rank text into tier and position.

    Unrecognised text comes back with ``tier=None`` and the input kept in
    ``raw``; this never raises.
    """
    clean = text.strip()
    for kanji, tier in _TIERS_BY_LENGTH:
        if clean.startswith(kanji):
            rest = clean[len(kanji):].strip()
            position = parse_position(rest) if rest else None
            if rest and position is None:
                logger.debug("Unparsed position %r in rank %r", rest, text)
            return ParsedRank(tier=tier, position=position, raw=text)

    # Bare position, only meaningful with a division from context
    if clean == HITTOU or clean.endswith(MAIME):
        return ParsedRank(tier=None, position=parse_position(clean), raw=text)

    return ParsedRank(tier=None, position=None, raw=text)


def to_banzuke_slot(
    parsed: ParsedRank,
    side: str,
    division: str | None = None,
) -> BanzukeSlot | None:
    """Place a parsed rank on the banzuke, or None if it cannot be placed.

    ``division`` is only used when the rank text carried no tier name.
    Numbered tiers without a position are not placed.
    """
    if parsed.tier in SANYAKU:
        return BanzukeSlot("Makuuchi", NamedRank(parsed.tier), side)

    if parsed.tier == "Maegashira":
        target = "Makuuchi"
    elif parsed.tier in DIVISIONS:
        target = parsed.tier
    elif parsed.tier is None and division is not None:
        target = division
    else:
        return None

    if parsed.position is None:
        return None
    return BanzukeSlot(target, NumberedRank(parsed.position), side)
