#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from solid_guide.config.loader import ConfigLoader
from solid_guide.config.validation import ConfigValidator
from solid_guide.errors import ConfigurationError


def main():
    """Validate config/guide.yaml, or the directory given as the first argument."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"Validating {loader.config_dir / 'guide.yaml'}...")

    try:
        config = loader.merge_config()
    except ConfigurationError as e:
        print(f"Cannot load configuration: {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value!r})")
        sys.exit(1)

    print("Configuration is valid")


if __name__ == "__main__":
    main()
