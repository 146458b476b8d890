# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
Path Cache Infrastructure

The path builders are pure, so identical geometry always produces an
identical path. This module memoizes built paths so a caller that lays out
the same view repeatedly does not rebuild them.

Architecture:
- PathCacheKey: geometry fingerprint of one build request
- PathCache: thread-safe LRU cache with a configurable entry limit

Cache Key Design:
- kind: "outline" or "border" (different builders, separate entries)
- bounds: (min_x, min_y, height, width) of the caller's rectangle
- fallback_radius: the caller's existing radius, used when radius is 0
- radius, corners, border_width: the request itself
- use_height_for_radius, glitch_fix: change the geometry, so part of the key

Invalidation: any change in geometry produces a different key, so stale
entries are never returned; they age out through LRU eviction. discard()
and clear() remove entries explicitly.
"""

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable

from . import error as sq_error
from . import types as sq

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathCacheKey:
    """Unique identifier for a cached path.

    Uses frozen dataclass for automatic __hash__ and __eq__ generation,
    making it suitable as a dictionary key.
    """
    kind: str
    bounds: tuple               # (min_x, min_y, height, width)
    fallback_radius: float
    radius: float
    corners: str                # corner_key() flags, e.g. "1100"
    border_width: float
    use_height_for_radius: bool = True
    glitch_fix: bool = False


class PathCache:
    """LRU cache for built squircle paths.

    Uses OrderedDict for O(1) LRU operations. When a path is accessed it
    moves to the end (most recently used). When capacity is exceeded, the
    first item (least recently used) is evicted.

    Thread Safety: every operation holds an internal lock, so one cache can
    be shared by threads laying out views concurrently. Builds run outside
    the lock; two threads missing on the same key may both build, and the
    second put simply replaces the first, keeping one entry per key.
    """
    DEFAULT_MAX_ENTRIES = sq.DEFAULT_CACHE_ENTRIES

    def __init__(self, max_entries: int | None = None) -> None:
        """Initialize path cache with optional size limit.

        Args:
            max_entries: Maximum cached paths before LRU eviction.
                        Defaults to DEFAULT_MAX_ENTRIES.
        """
        self._cache: OrderedDict[PathCacheKey, sq.Path] = OrderedDict()
        self._max_entries = max_entries or self.DEFAULT_MAX_ENTRIES
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: PathCacheKey) -> sq.Path | None:
        """Retrieve cached path, updating LRU order.

        Returns:
            The cached Path if found, None otherwise
        """
        with self._lock:
            path = self._cache.get(key)
            if path is not None:
                self._hits += 1
                self._cache.move_to_end(key)
            else:
                self._misses += 1
            return path

    def put(self, key: PathCacheKey, path: sq.Path) -> None:
        """Cache a path with LRU eviction.

        If the key already exists, updates value and LRU position.
        """
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
                self._cache[key] = path
                return
            if len(self._cache) >= self._max_entries:
                evicted, _ = self._cache.popitem(last=False)
                self._evictions += 1
                logger.debug("Evicted cached %s path %s", evicted.kind, evicted.bounds)
            self._cache[key] = path

    def get_or_build(self, key: PathCacheKey, build: Callable[[], sq.Path]) -> sq.Path | None:
        """Return the cached path for key, building and storing it on a miss.

        A build that fails with NonFinitePointError yields None and leaves
        the cache untouched; the same key will be rebuilt (and fail again)
        on the next call.
        """
        path = self.get(key)
        if path is not None:
            return path
        try:
            path = build()
        except sq_error.NonFinitePointError as exc:
            logger.debug("Skipping %s path for %s: %s", key.kind, key.bounds, exc)
            return None
        self.put(key, path)
        return path

    def discard(self, key: PathCacheKey) -> None:
        """Drop one entry if present."""
        with self._lock:
            self._cache.pop(key, None)

    def clear(self) -> None:
        """Clear entire cache and reset statistics."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def stats(self) -> dict:
        """Return cache statistics for debugging.

        Returns:
            Dictionary with entries count, max_entries, hits, misses,
            evictions and hit_rate
        """
        with self._lock:
            total = self._hits + self._misses
            return {
                'entries': len(self._cache),
                'max_entries': self._max_entries,
                'hits': self._hits,
                'misses': self._misses,
                'evictions': self._evictions,
                'hit_rate': self._hits / total if total > 0 else 0.0
            }

    def __contains__(self, key: PathCacheKey) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        """Return number of cached entries."""
        with self._lock:
            return len(self._cache)


def make_cache_key(
    kind: str,
    bounds: sq.Rect,
    radius: float,
    corners: int,
    border_width: float,
    fallback_radius: float = 0.0,
    use_height_for_radius: bool = True,
    glitch_fix: bool = False,
) -> PathCacheKey:
    """Create the cache key for one build request.

    Every input that changes the built path is part of the key. Floats are
    stored unrounded: a path is only reused for exactly the same geometry.
    """
    return PathCacheKey(
        kind=kind,
        bounds=(bounds.min_x, bounds.min_y, bounds.height, bounds.width),
        fallback_radius=float(fallback_radius),
        radius=float(radius),
        corners=sq.corner_key(corners),
        border_width=float(border_width),
        use_height_for_radius=use_height_for_radius,
        glitch_fix=glitch_fix,
    )
