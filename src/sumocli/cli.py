"""CLI entry point and main processing flow."""

import argparse
import logging
import sys
import time
from functools import partial
from pathlib import Path

import requests

from sumocli.cache import CacheStore
from sumocli.config import CACHE_DIR, DOWNLOAD_DELAY, TOTAL_DAYS
from sumocli.fetch import Fetcher, fetch_page
from sumocli.models import DIVISIONS, Rikishi
from sumocli.orchestrate import fetch_day, fetch_standings
from sumocli.parse_torikumi import roster
from sumocli.ratelimit import RateLimiter
from sumocli.util import FetchError, SumocliError

logger = logging.getLogger("sumocli")


def _day(value: str) -> int:
    day = int(value)
    if not 1 <= day <= TOTAL_DAYS:
        raise argparse.ArgumentTypeError(f"day must be 1-{TOTAL_DAYS}")
    return day


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sumocli",
        description="Fetch daily torikumi from sumo.or.jp and list rikishi in banzuke order.",
    )
    parser.add_argument(
        "--day", type=_day, default=None,
        help=f"Tournament day (1-{TOTAL_DAYS}); required unless --stats",
    )
    parser.add_argument(
        "--stats", action="store_true", default=False,
        help="List the hoshitori (win/loss) table instead of one day's torikumi",
    )
    parser.add_argument(
        "--division", action="append", choices=DIVISIONS, default=None,
        help="Division to fetch; repeatable (default: all)",
    )
    parser.add_argument(
        "--force", action="store_true", default=False,
        help="Ignore cached pages and download again",
    )
    parser.add_argument(
        "--sequential", action="store_true", default=False,
        help="Fetch divisions one at a time instead of in parallel",
    )
    parser.add_argument(
        "--cache-dir", type=Path, default=CACHE_DIR,
        help=f"HTML cache directory (default: {CACHE_DIR})",
    )
    parser.add_argument(
        "--log-level", choices=["INFO", "DEBUG"], default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )


def _format_row(r: Rikishi) -> str:
    record = f"{r.record.wins}-{r.record.losses}"
    if r.record.rest is not None:
        record += f"-{r.record.rest}"
    division = r.slot.division if r.slot else ""
    side = r.slot.side if r.slot else ""
    return "\t".join([division, r.rank_text, side, r.shikona, record])


def _run_day(fetcher: Fetcher, args: argparse.Namespace, divisions: list[str]) -> int:
    bouts_by_division = fetch_day(
        fetcher, args.day, divisions,
        force_refresh=args.force, parallel=not args.sequential,
    )

    all_bouts = []
    for division, bouts in bouts_by_division.items():
        if not bouts:
            logger.warning("Day %d: no data for %s (not published yet?)", args.day, division)
        else:
            logger.info("Day %d: %s %d bouts", args.day, division, len(bouts))
        all_bouts.extend(bouts)

    for rikishi in roster(all_bouts):
        print(_format_row(rikishi))
    logger.info("Bouts: %d", len(all_bouts))
    return len(all_bouts)


def _run_stats(fetcher: Fetcher, args: argparse.Namespace, divisions: list[str]) -> int:
    standings = fetch_standings(
        fetcher, divisions,
        force_refresh=args.force, parallel=not args.sequential,
    )

    total = 0
    for division, rikishi in standings.items():
        logger.info("Stats: %s %d rikishi", division, len(rikishi))
        for r in rikishi:
            print(_format_row(r))
        total += len(rikishi)
    logger.info("Rikishi: %d", total)
    return total


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.day is None and not args.stats:
        parser.error("--day is required unless --stats is given")

    _setup_logging(args.log_level)

    divisions = args.division or list(DIVISIONS)
    if args.stats:
        logger.info("Starting sumocli stats for divisions=%s", ",".join(divisions))
    else:
        logger.info("Starting sumocli for day=%d divisions=%s", args.day, ",".join(divisions))
    logger.info(
        "Options: force=%s sequential=%s cache=%s",
        args.force, args.sequential, args.cache_dir,
    )

    start_time = time.time()

    try:
        with requests.Session() as session:
            fetcher = Fetcher(
                CacheStore(args.cache_dir),
                RateLimiter(DOWNLOAD_DELAY),
                get_page=partial(fetch_page, session=session),
            )
            if args.stats:
                _run_stats(fetcher, args, divisions)
            else:
                _run_day(fetcher, args, divisions)

        elapsed = time.time() - start_time
        logger.info("=== Summary ===")
        logger.info("Elapsed: %.1fs", elapsed)

    except FetchError as e:
        logger.error("Download failed, check your connection and retry: %s", e)
        sys.exit(1)
    except SumocliError as e:
        logger.error("Fatal error: %s", e)
        sys.exit(1)
    except Exception as e:
        logger.error("Unexpected error: %s", e, exc_info=True)
        sys.exit(1)
