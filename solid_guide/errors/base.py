"""Root of the guide's exception hierarchy."""

from typing import Optional, Dict, Any


class GuideError(Exception):
    """Base class for every error raised by the guide tooling."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False
