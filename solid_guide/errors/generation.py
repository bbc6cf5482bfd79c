"""
Generation error classifications.

These cover producing the guide: loading configuration, rendering the
document, writing it out and verifying the examples.
"""

from typing import Optional, Any

from .base import GuideError


class GenerationError(GuideError):
    """Base class for failures while building or verifying the guide."""


class ConfigurationError(GenerationError):
    """Merged configuration did not pass validation."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class RenderError(GenerationError):
    """A principle section could not be rendered."""

    def __init__(self, message: str, principle: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.principle = principle


class OutputError(GenerationError):
    """A rendered document could not be written to its destination."""

    def __init__(self, message: str, output_name: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.output_name = output_name
        self.target = target


class FidelityError(GenerationError):
    """One or more examples no longer demonstrate their principle."""

    def __init__(self, message: str, failures: Optional[list[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.failures = failures or []
