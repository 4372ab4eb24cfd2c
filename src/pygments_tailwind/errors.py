"""Exception classes for pygments-tailwind.

Provides standardized exceptions for error handling throughout the package.
Errors raised by collaborators (lexers, output sinks, Pygments option
parsing) are never wrapped; they reach the caller unchanged.
"""

from __future__ import annotations


class TailwindError(Exception):
    """Base exception for all pygments-tailwind errors.

    Subclass this for specific error categories.
    """

    pass


class ThemeError(TailwindError):
    """Error while building or resolving a theme.

    Raised for malformed colour values, unknown style-string words and
    unknown Pygments style names.
    """

    def __init__(self, message: str, theme: str | None = None) -> None:
        """Initialize theme error.

        Args:
            message: Error description
            theme: Name of the theme being built (optional)
        """
        self.theme = theme
        location = f"Theme '{theme}': " if theme else ""
        super().__init__(f"{location}{message}")


class ConfigError(TailwindError, ValueError):
    """Invalid formatter configuration.

    Raised when a highlight range, tab width or cache capacity is out of
    bounds.
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize configuration error.

        Args:
            option: Name of the offending option
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")


class RenderError(TailwindError):
    """Error during markup rendering.

    Raised when the token stream yields something that is not a
    ``(category, str)`` pair.
    """

    pass
