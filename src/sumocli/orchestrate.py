"""Fetch many torikumi or hoshitori pages in parallel or in order."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from sumocli.config import MAX_WORKERS
from sumocli.fetch import Fetcher
from sumocli.models import DIVISIONS, Bout, FetchOutcome, Rikishi, SourceKey
from sumocli.parse_hoshitori import parse_hoshitori_page
from sumocli.parse_torikumi import parse_torikumi_page

logger = logging.getLogger(__name__)


def acquire_all(
    fetcher: Fetcher,
    keys: Iterable[SourceKey],
    force_refresh: bool = False,
    parallel: bool = True,
    max_workers: int = MAX_WORKERS,
) -> list[FetchOutcome]:
    """Fetch every key; outcomes are returned in input order.

    In parallel mode all fetches are submitted at once and only the network
    legs are spaced out by the fetcher's rate limiter. Transport and cache
    write errors propagate; rejected pages are logged and returned as
    unaccepted outcomes.
    """
    keys = list(keys)
    if parallel and len(keys) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outcomes = list(executor.map(lambda k: fetcher.fetch(k, force_refresh), keys))
    else:
        outcomes = [fetcher.fetch(k, force_refresh) for k in keys]

    for outcome in outcomes:
        _log_outcome(outcome)
    return outcomes


def _log_outcome(outcome: FetchOutcome) -> None:
    key = outcome.key
    if outcome.accepted:
        logger.debug("%s day %d: %s", key.division, key.day, outcome.origin)
        return
    logger.warning("HTML date validation failed for %s day %d:", key.division, key.day)
    for warning in outcome.warnings:
        logger.warning("  - %s", warning)


def accepted_content(outcome: FetchOutcome) -> str | None:
    """Content usable downstream, or None when validation rejected it."""
    return outcome.content if outcome.accepted else None


def fetch_day(
    fetcher: Fetcher,
    day: int,
    divisions: Iterable[str] = DIVISIONS,
    force_refresh: bool = False,
    parallel: bool = True,
) -> dict[str, list[Bout]]:
    """Fetch and parse one tournament day for each division.

    A division whose page is not (yet) the requested day maps to [].
    """
    keys = [SourceKey(division, day) for division in divisions]
    outcomes = acquire_all(fetcher, keys, force_refresh=force_refresh, parallel=parallel)

    bouts: dict[str, list[Bout]] = {}
    for outcome in outcomes:
        html = accepted_content(outcome)
        division = outcome.key.division
        bouts[division] = parse_torikumi_page(html, division) if html is not None else []
    return bouts


def fetch_standings(
    fetcher: Fetcher,
    divisions: Iterable[str] = DIVISIONS,
    force_refresh: bool = False,
    parallel: bool = True,
    max_workers: int = MAX_WORKERS,
) -> dict[str, list[Rikishi]]:
    """Fetch and parse each division's hoshitori table, in banzuke order."""
    divisions = list(divisions)
    if parallel and len(divisions) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            pages = list(executor.map(lambda d: fetcher.fetch_stats(d, force_refresh), divisions))
    else:
        pages = [fetcher.fetch_stats(d, force_refresh) for d in divisions]

    return {
        division: parse_hoshitori_page(html, division)
        for division, html in zip(divisions, pages)
    }
