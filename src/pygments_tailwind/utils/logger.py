"""Logger lookup for pygments-tailwind.

Every module logs under the ``pygments_tailwind`` namespace, so applications
can tune the whole package with one ``logging.getLogger("pygments_tailwind")``
call. The package emits debug records only (cache misses and evictions,
skipped theme colours, lexer fallbacks); it never configures handlers.

Example:
    >>> from pygments_tailwind.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Class cache miss")
"""

from __future__ import annotations

import logging

_ROOT = "pygments_tailwind"


def get_logger(name: str) -> logging.Logger:
    """Return the package logger for ``name``.

    Names outside the package namespace get the ``pygments_tailwind.`` prefix;
    module ``__name__`` values are used as is.

    Example:
        >>> get_logger("cache").name
        'pygments_tailwind.cache'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
