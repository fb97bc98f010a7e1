"""Single-file cache for the extracted weather JSON, invalidated by mtime."""

import logging
import os
import tempfile
import time
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from wttr.errors import CacheIoError, HomeDirUnavailable

logger = logging.getLogger(__name__)

CACHE_DIR = ".cache"
CACHE_FILE = "wttr.json"
REFRESH_SECONDS = 3600


class CacheStore(Protocol):
    def read_if_fresh(self) -> str | None: ...

    def write(self, content: str) -> None: ...


def default_cache_path(home: Path | None = None) -> Path:
    """Resolve <home>/.cache/wttr.json. Raises HomeDirUnavailable."""
    if home is None:
        home = resolve_home()
    return home / CACHE_DIR / CACHE_FILE


def resolve_home() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirUnavailable("Unable to find home directory") from e
    # expanduser leaves "~" untouched when it cannot resolve it
    if str(home) == "~":
        raise HomeDirUnavailable("Unable to find home directory")
    return home


class FileCacheStore:
    """Cache file on disk. No locking: concurrent invocations may race."""

    def __init__(
        self,
        path: Path,
        refresh_seconds: int = REFRESH_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.path = Path(path)
        self.refresh_seconds = refresh_seconds
        self.clock = clock

    def read_if_fresh(self) -> str | None:
        """Return cached content if it is at most refresh_seconds old.

        A stale file is removed. Missing file returns None.
        """
        try:
            mtime = self.path.stat().st_mtime
        except FileNotFoundError:
            logger.info("No cache file at %s", self.path)
            return None
        except OSError as e:
            raise CacheIoError(f"Cannot stat cache {self.path}: {e}") from e

        age = max(0.0, self.clock() - mtime)
        if age > self.refresh_seconds:
            logger.info("Cache %s is stale (%.0fs old), removing", self.path, age)
            try:
                self.path.unlink()
            except FileNotFoundError:
                pass
            except OSError as e:
                raise CacheIoError(f"Cannot remove stale cache {self.path}: {e}") from e
            return None

        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise CacheIoError(f"Cannot read cache {self.path}: {e}") from e
        logger.info("Using cache %s (%.0fs old)", self.path, age)
        return content

    def write(self, content: str) -> None:
        """Replace the cache file with content.

        Written to a temporary sibling first, then renamed over the target.
        The cache directory must already exist.
        """
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, UnicodeError) as e:
            raise CacheIoError(f"Cannot write cache {self.path}: {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        logger.info("Wrote cache %s", self.path)
