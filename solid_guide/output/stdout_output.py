"""Standard output document destination."""

import sys

from ..renderer import RenderedDocument
from .base import BaseDocumentOutput, OutputResult, OutputStatus


class StdoutOutput(BaseDocumentOutput):
    """Prints the rendered guide."""

    def write(self, document: RenderedDocument) -> OutputResult:
        """Print the document to stdout."""
        try:
            sys.stdout.write(document.text)
            sys.stdout.flush()
        except (OSError, ValueError) as e:
            self.logger.error("Failed to print document", error=str(e))
            return self._record(OutputResult(
                status=OutputStatus.FAILED,
                message=f"Stdout error: {e}",
                target="stdout",
                error=e
            ))

        self.logger.info("Document printed", principles=document.principles)
        return self._record(OutputResult(
            status=OutputStatus.SUCCESS,
            message="Printed to stdout",
            target="stdout",
            bytes_written=len(document.text.encode("utf-8"))
        ))

    def health_check(self) -> bool:
        """Check if stdout is available."""
        try:
            return sys.stdout.writable()
        except (OSError, ValueError):
            return False
