"""
Error classification for the SOLID guide tooling.

Lookup errors are recoverable (the caller asked for something that does not
exist and can ask again); generation, configuration and fidelity errors
are not.
"""

from .base import GuideError
from .lookup import (
    LookupFailureError,
    UnknownPrincipleError,
    SnippetNotFoundError,
)
from .generation import (
    GenerationError,
    RenderError,
    OutputError,
    ConfigurationError,
    FidelityError,
)

__all__ = [
    "GuideError",
    # Lookup Errors
    "LookupFailureError",
    "UnknownPrincipleError",
    "SnippetNotFoundError",
    # Generation Errors
    "GenerationError",
    "RenderError",
    "OutputError",
    "ConfigurationError",
    "FidelityError",
]
