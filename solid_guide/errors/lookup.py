"""
Lookup error classifications.

Raised when a caller names a principle, snippet part or example object
that the catalog does not know about.
"""

from typing import Optional

from .base import GuideError


class LookupFailureError(GuideError):
    """Base class for failed catalog lookups."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, **kwargs)
        self.recoverable = True


class UnknownPrincipleError(LookupFailureError):
    """No principle matches the given letter, slug or name."""

    def __init__(self, message: str, key: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.key = key


class SnippetNotFoundError(LookupFailureError):
    """A snippet part or one of its example objects does not exist."""

    def __init__(self, message: str, principle: Optional[str] = None,
                 part: Optional[str] = None, object_name: Optional[str] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.principle = principle
        self.part = part
        self.object_name = object_name
