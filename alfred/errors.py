"""Exception types raised by alfred.

Everything the CLI reports as a failure derives from :class:`AlfredError`,
except filesystem errors, which propagate as the original ``OSError``.
"""

from __future__ import annotations


class AlfredError(Exception):
    """Base class for all alfred failures."""


class ConfigError(AlfredError):
    """Raised when the configuration file is missing or cannot be parsed."""

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class ValidationError(AlfredError):
    """Raised when a package or class name fails its syntax check."""

    def __init__(self, message: str, value: str = "") -> None:
        self.value = value
        super().__init__(message)


class PromptAborted(AlfredError):
    """Raised when the user cancels an interactive prompt."""


class RenderError(AlfredError):
    """Raised when a template and its context do not fit together."""

    def __init__(self, message: str, template: str = "") -> None:
        self.template = template
        super().__init__(message)
