"""Utility modules for pygments-tailwind.

Provides:
- text: escape_html, join_classes for markup emission
- logger: get_logger for logging
"""

from pygments_tailwind.utils.logger import get_logger
from pygments_tailwind.utils.text import escape_html, join_classes

__all__ = [
    "escape_html",
    "get_logger",
    "join_classes",
]
