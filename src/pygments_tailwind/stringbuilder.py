"""StringBuilder sink for buffered rendering.

The renderer streams markup fragments into a write callable. When the caller
wants a string back instead of writing to a file, fragments are collected in
a list and joined once at the end: O(n) total instead of the O(n²) cost of
repeated concatenation.

Thread Safety:
    Each TailwindRenderer.render() call creates its own StringBuilder.
    No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator usable as a text sink.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.write("<span>")
        6
        >>> _ = sb.append("x").append("</span>")
        >>> sb.build()
        '<span>x</span>'

    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a fragment (empty fragments are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def write(self, s: str) -> int:
        """File-like write; returns the number of characters written."""
        self.append(s)
        return len(s)

    def build(self) -> str:
        """Join all fragments into the final string."""
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Drop all accumulated fragments."""
        self._parts.clear()
        self._length = 0
        return self

    def __len__(self) -> int:
        """Return the total number of characters accumulated."""
        return self._length

    def __bool__(self) -> bool:
        return bool(self._parts)
