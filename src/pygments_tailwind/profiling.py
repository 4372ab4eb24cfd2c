"""RenderAccumulator: opt-in profiling for rendering.

This module provides accumulated metrics while rendering:
- Render calls, lines and tokens emitted
- Class cache hits and misses

Zero overhead when disabled (get_render_accumulator() returns None).

Example:
    from pygments_tailwind import TailwindRenderer
    from pygments_tailwind.profiling import profiled_render

    renderer = TailwindRenderer()
    with profiled_render() as metrics:
        renderer.render(tokens, light, dark)
        renderer.render(tokens, light, dark)

    print(metrics.summary())
    # {"total_ms": 0.8, "render_calls": 2, "lines": 20, "tokens": 96,
    #  "cache_hits": 1, "cache_misses": 1}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RenderAccumulator:
    """Accumulated metrics during rendering.

    Attributes:
        start_time: Profiling start timestamp.
        render_calls: Number of render calls recorded.
        lines: Lines emitted.
        tokens: Tokens emitted.
        cache_hits: Class cache lookups served from the cache.
        cache_misses: Class cache lookups that computed a mapping.

    """

    start_time: float = field(default_factory=perf_counter)
    render_calls: int = 0
    lines: int = 0
    tokens: int = 0
    cache_hits: int = 0
    cache_misses: int = 0

    def record_render(self, lines: int, tokens: int) -> None:
        self.render_calls += 1
        self.lines += lines
        self.tokens += tokens

    def record_cache(self, hit: bool) -> None:
        if hit:
            self.cache_hits += 1
        else:
            self.cache_misses += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of render metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "render_calls": self.render_calls,
            "lines": self.lines,
            "tokens": self.tokens,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled rendering.

    Creates a RenderAccumulator and makes it available via
    get_render_accumulator() for the duration of the with block.

    Yields:
        RenderAccumulator that will be populated during render calls.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "RenderAccumulator",
    "get_render_accumulator",
    "profiled_render",
]
