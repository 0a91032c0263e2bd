"""
Cache revalidation hook.

Writes that change what a page shows call ``revalidate_path`` with that page's
path. The default implementation logs the path and remembers the most recent
ones so a front end (or a test) can ask which paths went stale.
"""

import logging
from collections import deque
from typing import Callable, Deque, List

logger = logging.getLogger(__name__)

Revalidator = Callable[[str], None]

# Oldest entries are dropped once the limit is reached
MAX_STALE_PATHS = 100

_stale_paths: Deque[str] = deque(maxlen=MAX_STALE_PATHS)

def revalidate_path(path: str) -> None:
    """Mark the cached page at ``path`` as stale."""
    logger.info(f"Revalidating path {path}")
    _stale_paths.append(path)

def pop_stale_paths() -> List[str]:
    """Return and clear the paths revalidated since the last call."""
    paths = list(_stale_paths)
    _stale_paths.clear()
    return paths
