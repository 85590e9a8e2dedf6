"""Typed domain errors for the route content engine.

Nothing in the engine is fatal for page rendering: interpolation and
payload errors are raised internally and caught at the boundary that
knows how to degrade (hard-default sentence, absent upstream field).

All errors inherit from ContentEngineError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ContentEngineError(Exception):
    """Base error for the content engine.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InterpolationError(ContentEngineError):
    """A template referenced a value that is undefined.

    Caught by the resolver and replaced by the hard-default sentence.

    Attributes:
        template_key: Identifier of the template being filled
        missing_key: Placeholder that had no value
    """

    template_key: str = ""
    missing_key: str = ""


@dataclass
class DuplicateSectionError(ContentEngineError):
    """A section was attached to a bundle twice.

    Attributes:
        section: The offending section key
    """

    section: str = ""


@dataclass
class UpstreamPayloadError(ContentEngineError):
    """An upstream payload field has an unusable shape.

    Attributes:
        field_name: Name of the field in the raw payload
    """

    field_name: str = ""


@dataclass
class ConfigurationError(ContentEngineError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
