"""Bounded LRU cache of class mappings, keyed by theme identity.

Computing the class mapping for a theme pair walks every standard category
through the style differ. Renders that reuse the same (light, dark) pair hit
the cache instead.

Keys compare themes by identity, not by content: two Theme objects with the
same entries are different keys. get_theme() memoizes Pygments conversions so
the same Pygments style always maps to the same Theme object.

Thread Safety:
    All access goes through one lock. A missing mapping is computed while
    holding it, so concurrent misses for the same pair are serialized and
    compute runs once per pair.

Example:
    >>> from pygments_tailwind.config import FormatterConfig
    >>> from pygments_tailwind.differ import build_class_mapping
    >>> from pygments_tailwind.theme import Theme
    >>> config = FormatterConfig()
    >>> cache = ClassCache(lambda light, dark: build_class_mapping(light, dark, config))
    >>> theme = Theme("plain")
    >>> cache.get(theme) is cache.get(theme, theme)
    True
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from pygments_tailwind.differ import ClassMapping
from pygments_tailwind.errors import ConfigError
from pygments_tailwind.profiling import get_render_accumulator
from pygments_tailwind.theme import Theme
from pygments_tailwind.utils.logger import get_logger

logger = get_logger(__name__)

CLASS_CACHE_LIMIT = 32

ComputeMapping = Callable[[Theme, Theme], ClassMapping]


class ClassCache:
    """LRU cache of ClassMapping per (light, dark) theme pair.

    Entries are kept in a list ordered from least to most recently used.
    The bound is small, so linear scans are cheap.
    """

    __slots__ = ("_compute", "_capacity", "_entries", "_lock")

    def __init__(self, compute: ComputeMapping, capacity: int = CLASS_CACHE_LIMIT) -> None:
        """Initialize an empty cache.

        Args:
            compute: Builds the mapping for a (light, dark) pair on a miss
            capacity: Maximum number of theme pairs kept

        Raises:
            ConfigError: capacity is smaller than 1
        """
        if capacity < 1:
            raise ConfigError("cache_capacity", f"must be at least 1, got {capacity}")
        self._compute = compute
        self._capacity = capacity
        self._entries: list[tuple[Theme, Theme, ClassMapping]] = []
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, light: Theme, dark: Theme | None = None) -> ClassMapping:
        """Return the class mapping for a theme pair, computing it on a miss.

        Args:
            light: Light theme
            dark: Dark theme; defaults to ``light``

        Returns:
            The shared, read-only ClassMapping for the pair
        """
        if dark is None:
            dark = light
        acc = get_render_accumulator()
        with self._lock:
            entries = self._entries
            for i in range(len(entries) - 1, -1, -1):
                entry = entries[i]
                if entry[0] is light and entry[1] is dark:
                    if i != len(entries) - 1:
                        del entries[i]
                        entries.append(entry)
                    if acc is not None:
                        acc.record_cache(hit=True)
                    return entry[2]

            logger.debug("Class cache miss for (%s, %s)", light.name, dark.name)
            mapping = self._compute(light, dark)
            if len(entries) >= self._capacity:
                evicted = entries.pop(0)
                logger.debug("Class cache evicted (%s, %s)", evicted[0].name, evicted[1].name)
            entries.append((light, dark, mapping))
            if acc is not None:
                acc.record_cache(hit=False)
            return mapping

    def clear(self) -> None:
        """Drop every cached mapping."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, pair: object) -> bool:
        """Check whether a (light, dark) pair is cached, without touching recency."""
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        light, dark = pair
        if dark is None:
            dark = light
        with self._lock:
            return any(e[0] is light and e[1] is dark for e in self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = [
    "CLASS_CACHE_LIMIT",
    "ClassCache",
    "ComputeMapping",
]
