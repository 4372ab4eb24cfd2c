"""Text processing utilities for pygments-tailwind.

Example:
    >>> from pygments_tailwind.utils.text import escape_html
    >>> escape_html("<a&b>")
    '&lt;a&amp;b&gt;'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters in token text.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &#34;
    - ' becomes &#39;

    Args:
        text: Literal token text

    Returns:
        Escaped text, safe inside element content and attribute values

    Examples:
        >>> escape_html("x = '<b>'")
        'x = &#39;&lt;b&gt;&#39;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&#34;").replace("'", "&#39;")


def join_classes(*groups: str) -> str:
    """Join class strings with single spaces, skipping empty groups.

    Examples:
        >>> join_classes("flex", "", "bg-[#ffffff]")
        'flex bg-[#ffffff]'
    """
    return " ".join(group for group in groups if group)
