"""Key -> HTML blob cache on the local filesystem."""

import base64
import logging
import os
import re
import tempfile
from pathlib import Path

from sumocli.util import CacheWriteError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9]")


def cache_key(url: str) -> str:
    """Derive a filesystem-safe key from a URL.

    Base64 of the URL with every non-alphanumeric character dropped. This
    matches the file names already written to ~/.sumo-cli/cache.
    """
    encoded = base64.b64encode(url.encode("utf-8")).decode("ascii")
    return _UNSAFE_CHARS.sub("", encoded)


class CacheStore:
    """Stores one HTML document per key under a root directory."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        return self.root / f"{key}.html"

    def get(self, key: str) -> str | None:
        """Return the cached document, or None if absent or unreadable."""
        path = self.path_for(key)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cache read failed for %s, treating as miss: %s", path, e)
            return None
        logger.info("Cache hit: %s", path.name)
        return content

    def put(self, key: str, content: str) -> None:
        """Replace the document stored under key.

        Written to a temp file in the same directory then renamed, so
        readers see either the old document or the new one in full.
        """
        path = self.path_for(key)
        tmp_name = None
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.root, prefix=f".{key[:16]}-", suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, UnicodeError) as e:
            raise CacheWriteError(f"Failed to write cache {path}: {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)
        logger.debug("Cached to %s", path.name)
