"""Default configuration parameters for the SOLID guide."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentParams:
    """Rendered document layout."""
    title: str = "SOLID Principles"
    intro: str = (
        "Five guidelines for object-oriented design. Each section shows a "
        "short example that breaks the principle and a rewrite that follows it."
    )
    include_violations: bool = True
    include_recap: bool = True
    code_language: str = "python"                    # Fence info string


@dataclass(frozen=True)
class ImageParams:
    """Reference image links placed under each section heading."""
    enabled: bool = True
    base_path: str = "images"
    extension: str = "png"


@dataclass(frozen=True)
class OutputParams:
    """Where a rendered document goes."""
    method: str = "stdout"                           # stdout, file
    path: str = "SOLID.md"
    overwrite: bool = True
    create_dirs: bool = True


@dataclass(frozen=True)
class FidelityParams:
    """Thresholds for the example fidelity checks."""
    max_public_methods: int = 2                      # Per single-responsibility collaborator
    scale_factors: tuple[float, ...] = (2.0, 0.5, 3.0)
    tolerance: float = 1e-9


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    document: DocumentParams
    images: ImageParams
    output: OutputParams
    fidelity: FidelityParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        document=DocumentParams(),
        images=ImageParams(),
        output=OutputParams(),
        fidelity=FidelityParams(),
        logging=LoggingParams(),
    )
