"""Markdown rendering of the SOLID guide."""

from dataclasses import dataclass, field
from typing import Optional

from .catalog import Principle, list_principles, recap, snippet
from .config.defaults import DefaultConfig, get_default_config
from .errors import LookupFailureError, RenderError
from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class RenderedDocument:
    """A rendered guide and what went into it."""
    text: str
    principles: list[str] = field(default_factory=list)
    image_refs: list[str] = field(default_factory=list)


class MarkdownRenderer:
    """Renders principles into a single markdown document."""

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()

    def render(self, principles: Optional[list[Principle]] = None) -> RenderedDocument:
        """
        Render the guide.

        Args:
            principles: Principles to include, defaults to all five

        Returns:
            Rendered document with its text and the image paths it references
        """
        selected = principles if principles is not None else list_principles()
        document = self.config.document

        lines = [f"# {document.title}", ""]
        if document.intro:
            lines.extend([document.intro, ""])

        image_refs = []
        for principle in selected:
            section, image_ref = self.render_section(principle)
            lines.extend(section)
            if image_ref:
                image_refs.append(image_ref)

        if document.include_recap and selected:
            lines.extend(["## Quick recap", ""])
            lines.extend(f"- {bullet}" for bullet in recap(selected))
            lines.append("")

        logger.info(
            "Rendered guide",
            principles=[p.letter for p in selected],
            image_count=len(image_refs),
        )

        return RenderedDocument(
            text="\n".join(lines).rstrip("\n") + "\n",
            principles=[p.letter for p in selected],
            image_refs=image_refs,
        )

    def render_section(self, principle: Principle) -> tuple[list[str], Optional[str]]:
        """Render one principle; returns its lines and image path, if any."""
        lines = [f"## {principle.letter}: {principle.name}", ""]

        image_ref = None
        if self.config.images.enabled:
            image_ref = self.image_path(principle)
            lines.extend([f"![{principle.name}]({image_ref})", ""])

        lines.extend([principle.summary, ""])

        try:
            if self.config.document.include_violations:
                lines.extend(["### Violation", "", principle.violation_text, ""])
                lines.extend(self._code_block(snippet(principle, "violation")))

            lines.extend(["### Adherence", "", principle.adherence_text, ""])
            lines.extend(self._code_block(snippet(principle, "adherence")))
        except LookupFailureError as e:
            logger.error(
                "Cannot render principle section",
                principle=principle.letter,
                error=str(e),
            )
            raise RenderError(
                f"Cannot render {principle.name}: {e}",
                principle=principle.letter,
                context={"principle": principle.letter, "module": principle.module},
            ) from e

        return lines, image_ref

    def image_path(self, principle: Principle) -> str:
        images = self.config.images
        filename = f"{principle.slug}.{images.extension}"
        base = images.base_path.rstrip("/")
        return f"{base}/{filename}" if base else filename

    def _code_block(self, code: str) -> list[str]:
        return [f"```{self.config.document.code_language}", code, "```", ""]
