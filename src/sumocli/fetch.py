"""HTTP fetch with rate limiting, caching and day validation."""

import logging
from typing import Callable

import requests

from sumocli.cache import CacheStore, cache_key
from sumocli.config import BASE_URL, HEADERS, MATCHUP_PATH, REQUEST_TIMEOUT, STATS_PATH
from sumocli.models import DIVISIONS, FetchOutcome, SourceKey, ValidationResult
from sumocli.ratelimit import RateLimiter
from sumocli.util import FetchError
from sumocli.validate import validate_html_date

logger = logging.getLogger(__name__)


def matchup_url(key: SourceKey) -> str:
    return BASE_URL + MATCHUP_PATH.format(division_no=key.division_no, day=key.day)


def stats_url(division: str) -> str:
    if division not in DIVISIONS:
        raise ValueError(f"Unknown division: {division!r}")
    return BASE_URL + STATS_PATH.format(division_no=DIVISIONS.index(division) + 1)


def fetch_page(url: str, session: requests.Session | None = None) -> str:
    """Fetch a page once. Any failure is raised as FetchError."""
    get = session.get if session is not None else requests.get
    logger.debug("Downloading %s", url)
    try:
        resp = get(url, headers=HEADERS, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise FetchError(f"Connection error for {url}: {e}") from e
    if resp.status_code != 200:
        raise FetchError(f"HTTP {resp.status_code} for {url}")
    # requests assumes ISO-8859-1 for text/* without a charset
    if not resp.encoding or resp.encoding.lower() == "iso-8859-1":
        resp.encoding = "utf-8"
    logger.debug("OK %s", url)
    return resp.text


class Fetcher:
    """Fetches one (division, day) page: cache first, then the network.

    Network results are validated against the requested day and cached only
    when accepted. Cached pages were validated when written and are returned
    as-is.
    """

    def __init__(
        self,
        cache: CacheStore,
        limiter: RateLimiter,
        get_page: Callable[[str], str] = fetch_page,
        validator: Callable[[str, int], ValidationResult] = validate_html_date,
    ) -> None:
        self.cache = cache
        self.limiter = limiter
        self.get_page = get_page
        self.validator = validator

    def fetch(self, key: SourceKey, force_refresh: bool = False) -> FetchOutcome:
        url = matchup_url(key)
        ckey = cache_key(url)

        if not force_refresh:
            cached = self.cache.get(ckey)
            if cached:
                return FetchOutcome(key=key, content=cached, origin="cache", accepted=True)

        self.limiter.acquire()
        html = self.get_page(url)

        validation = self.validator(html, key.day)
        if not validation.is_valid:
            logger.debug("Not caching %s: failed day validation", url)
            return FetchOutcome(
                key=key, content=html, origin="network", accepted=False,
                warnings=tuple(validation.warnings),
            )

        self.cache.put(ckey, html)
        return FetchOutcome(key=key, content=html, origin="network", accepted=True)

    def fetch_stats(self, division: str, force_refresh: bool = False) -> str:
        """Fetch a division's hoshitori (win/loss table) page.

        The table covers the whole basho, so there is no day to check and a
        download is cached as soon as it arrives. Use force_refresh to pick
        up later results.
        """
        url = stats_url(division)
        ckey = cache_key(url)

        if not force_refresh:
            cached = self.cache.get(ckey)
            if cached:
                return cached

        self.limiter.acquire()
        html = self.get_page(url)
        self.cache.put(ckey, html)
        return html
