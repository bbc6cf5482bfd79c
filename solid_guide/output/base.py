"""Base classes for rendered document outputs."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..config.defaults import OutputParams
from ..logging import get_logger
from ..renderer import RenderedDocument


class OutputStatus(Enum):
    """Document write status."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class OutputResult:
    """Result of a document write attempt."""
    status: OutputStatus
    message: Optional[str] = None
    target: Optional[str] = None
    bytes_written: int = 0
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status == OutputStatus.SUCCESS


class BaseDocumentOutput(ABC):
    """Base class for document outputs."""

    def __init__(self, name: str, config: OutputParams):
        self.name = name
        self.config = config
        self.logger = get_logger(f"solid_guide.output.{name}").bind(output_name=name)
        self._write_count = 0
        self._error_count = 0

    @abstractmethod
    def write(self, document: RenderedDocument) -> OutputResult:
        """
        Write a rendered document to the configured destination.

        Args:
            document: Rendered guide

        Returns:
            Result of the write attempt
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if the destination can be written to."""
        pass

    def _record(self, result: OutputResult) -> OutputResult:
        if result.ok:
            self._write_count += 1
        else:
            self._error_count += 1
        return result

    def get_stats(self) -> dict[str, Any]:
        """Get write statistics."""
        return {
            "name": self.name,
            "write_count": self._write_count,
            "error_count": self._error_count,
            "success_rate": (
                self._write_count / (self._write_count + self._error_count)
                if (self._write_count + self._error_count) > 0 else 0.0
            )
        }

    def reset_stats(self):
        """Reset write statistics."""
        self._write_count = 0
        self._error_count = 0
