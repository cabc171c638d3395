"""Snapshot sites for screenshot runs.

Cloning joomla-cms on every run is slow and rate limited, so a shallow clone is
kept in ``cache/`` for a day and copied into a fresh working site each time.
"""

import typing as t

from jrobo import external
from jrobo.utils.fs_utils import copy_tree, is_stale, remove_tree
from jrobo.utils.say_utils import say

UPSTREAM_URL = "https://github.com/joomla/joomla-cms.git"
DEFAULT_BRANCH = "staging"
CACHE_DIR = "cache"
SNAPSHOT_DIR = "joomla-cms"
CACHE_MAX_AGE = 60 * 60 * 24

Fetcher = t.Callable[[str, str, str], None]


def refresh_cache(
    branch: str | None,
    cache_dir: str = CACHE_DIR,
    *,
    fetch: Fetcher = external.git_clone,
    now: float | None = None,
) -> bool:
    """Re-clone ``cache_dir`` if it is missing or older than ``CACHE_MAX_AGE``.

    Returns True if a fetch happened.
    """
    if not is_stale(cache_dir, CACHE_MAX_AGE, now):
        return False
    remove_tree(cache_dir)
    fetch(UPSTREAM_URL, branch or DEFAULT_BRANCH, cache_dir)
    return True


def materialize_snapshot(
    branch: str | None,
    cache_dir: str = CACHE_DIR,
    working_dir: str = SNAPSHOT_DIR,
    *,
    fetch: Fetcher = external.git_clone,
    now: float | None = None,
) -> None:
    """Make ``working_dir`` a fresh, full copy of the (refreshed) snapshot cache.

    Raises:
        UndeletableDirectoryError: an old cache or working site could not be removed.
        SourceUnreadableError: the cache cannot be listed after fetching.
    """
    say(f"Creating {working_dir} site")
    refresh_cache(branch, cache_dir, fetch=fetch, now=now)

    remove_tree(working_dir)
    copy_tree(cache_dir, working_dir)

    say(f"Joomla snapshot site created at {working_dir}")
