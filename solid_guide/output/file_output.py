"""File document destination."""

import os
from pathlib import Path

from ..config.defaults import OutputParams
from ..renderer import RenderedDocument
from .base import BaseDocumentOutput, OutputResult, OutputStatus


class FileOutput(BaseDocumentOutput):
    """Writes the rendered guide to a markdown file."""

    def __init__(self, name: str, config: OutputParams):
        super().__init__(name, config)
        self.output_path = Path(config.path)

    def write(self, document: RenderedDocument) -> OutputResult:
        """Write the document, replacing the file only if allowed."""
        target = str(self.output_path)

        if self.output_path.exists() and not self.config.overwrite:
            message = f"Refusing to overwrite existing file: {target}"
            self.logger.error(message, path=target)
            return self._record(OutputResult(
                status=OutputStatus.FAILED,
                message=message,
                target=target
            ))

        if self.output_path.name in ("", ".."):
            message = f"Output path does not name a file: {target}"
            self.logger.error(message, path=target)
            return self._record(OutputResult(
                status=OutputStatus.FAILED,
                message=message,
                target=target
            ))

        # Replaced atomically; neither the target nor a temp file is left
        # behind half written.
        temp_path = self.output_path.parent / (self.output_path.name + ".tmp")
        data = document.text.encode("utf-8")
        try:
            if self.config.create_dirs:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)

            try:
                temp_path.write_bytes(data)
                temp_path.replace(self.output_path)
            except OSError:
                temp_path.unlink(missing_ok=True)
                raise

        except OSError as e:
            self.logger.error("Failed to write document", path=target, error=str(e))
            return self._record(OutputResult(
                status=OutputStatus.FAILED,
                message=f"File error: {e}",
                target=target,
                error=e
            ))

        self.logger.info(
            "Document written",
            path=target,
            bytes_written=len(data),
            principles=document.principles
        )
        return self._record(OutputResult(
            status=OutputStatus.SUCCESS,
            message=f"Written to {target}",
            target=target,
            bytes_written=len(data)
        ))

    def health_check(self) -> bool:
        """Check that the nearest existing parent directory is writable."""
        directory = self.output_path.parent
        while not directory.exists():
            if not self.config.create_dirs or directory == directory.parent:
                return False
            directory = directory.parent
        return os.access(directory, os.W_OK)
