#!/usr/bin/env python3
"""Configuration validation script."""

import argparse
import sys
from pathlib import Path

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from storydesk.config.loader import CONFIG_FILENAME, ConfigLoader
from storydesk.config.validation import ConfigValidator
from storydesk.errors import ConfigurationError


def main():
    """Main validation function."""
    parser = argparse.ArgumentParser(description=f"Validate {CONFIG_FILENAME}")
    parser.add_argument(
        "config_dir",
        nargs="?",
        type=Path,
        default=None,
        help="Directory holding the configuration file (defaults to ./config)",
    )
    args = parser.parse_args()

    loader = ConfigLoader.create(args.config_dir)
    print(f"🔍 Validating {loader.config_dir / CONFIG_FILENAME}...")

    try:
        merged = loader.merge_config()
    except (ConfigurationError, OSError, yaml.YAMLError) as e:
        print(f"❌ Could not read configuration: {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(merged)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    try:
        config = loader.load()
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    print(f"✅ Matcher: {config.matcher}")
    print(f"✅ Link count aliases: {', '.join(config.aliases.link_count)}")
    print(f"✅ Quarter labels: {config.calendar.label_style}")
    print(f"\n🎉 Configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
