"""Pre-wrapper protocol and built-in wrappers.

A pre wrapper supplies the markup around the whole code block. It is asked
twice when line numbers live in a table: once for the line-number column
(``code=False``) and once for the code itself (``code=True``).

Usage:
    from pygments_tailwind import TailwindFormatter
    from pygments_tailwind.wrappers import FunctionPreWrapper

    wrapper = FunctionPreWrapper(
        lambda code, attr: f"<div{attr}>" if code else "",
        lambda code: "</div>" if code else "",
    )
    formatter = TailwindFormatter(wrapper=wrapper)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


class PreWrapper(Protocol):
    """Protocol for block wrappers.

    Thread Safety:
        Implementations must be stateless. A wrapper is shared by every
        render that uses its formatter.
    """

    def start(self, code: bool, class_attr: str) -> str:
        """Return the opening markup.

        Args:
            code: True around highlighted code, False around line numbers
            class_attr: Pre-rendered `` class="..."`` attribute, or ""
        """
        ...

    def end(self, code: bool) -> str:
        """Return the closing markup."""
        ...


@dataclass(frozen=True, slots=True)
class FunctionPreWrapper:
    """PreWrapper built from two plain functions."""

    start_fn: Callable[[bool, str], str]
    end_fn: Callable[[bool], str]

    def start(self, code: bool, class_attr: str) -> str:
        return self.start_fn(code, class_attr)

    def end(self, code: bool) -> str:
        return self.end_fn(code)


def _default_start(code: bool, class_attr: str) -> str:
    if code:
        return f"<pre{class_attr}><code>"
    return f"<pre{class_attr}>"


def _default_end(code: bool) -> str:
    return "</code></pre>" if code else "</pre>"


def _inline_start(code: bool, class_attr: str) -> str:
    return f"<code{class_attr}>" if code else ""


def _inline_end(code: bool) -> str:
    return "</code>" if code else ""


DEFAULT_PRE_WRAPPER = FunctionPreWrapper(_default_start, _default_end)
NOP_PRE_WRAPPER = FunctionPreWrapper(lambda code, class_attr: "", lambda code: "")
INLINE_CODE_WRAPPER = FunctionPreWrapper(_inline_start, _inline_end)

__all__ = [
    "DEFAULT_PRE_WRAPPER",
    "FunctionPreWrapper",
    "INLINE_CODE_WRAPPER",
    "NOP_PRE_WRAPPER",
    "PreWrapper",
]
