"""Destinations for a rendered guide."""

from ..config.defaults import OutputParams
from ..errors import OutputError
from .base import BaseDocumentOutput, OutputResult, OutputStatus
from .file_output import FileOutput
from .stdout_output import StdoutOutput

__all__ = [
    "BaseDocumentOutput",
    "OutputResult",
    "OutputStatus",
    "FileOutput",
    "StdoutOutput",
    "create_output",
]


def create_output(params: OutputParams) -> BaseDocumentOutput:
    """Build the output configured by ``params.method``."""
    if params.method == "stdout":
        return StdoutOutput("stdout", params)
    if params.method == "file":
        return FileOutput("file", params)
    raise OutputError(
        f"Unsupported output method: {params.method}",
        output_name=params.method,
    )
