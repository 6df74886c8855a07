"""Fixed endpoints, paths and timing constants."""

from pathlib import Path

BASE_URL = "https://www.sumo.or.jp"
MATCHUP_PATH = "/ResultData/torikumi/{division_no}/{day}/"
# Whole-basho win/loss table; the trailing 1 is the page, not a day
STATS_PATH = "/ResultData/hoshitori/{division_no}/1/"

HEADERS = {
    "User-Agent": "sumocli/0.1 (+https://github.com/owner/sumo-cli)",
    "Accept-Language": "ja,en;q=0.8",
}
REQUEST_TIMEOUT = 30  # seconds

# Minimum spacing between the start of two downloads
DOWNLOAD_DELAY = 2.0  # seconds
MAX_WORKERS = 6

USER_DATA_DIR = Path.home() / ".sumo-cli"
CACHE_DIR = USER_DATA_DIR / "cache"

TOTAL_DAYS = 15
