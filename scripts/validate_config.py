#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from workout_sequencer.config.loader import ConfigLoader
from workout_sequencer.config.validation import ConfigValidator, ValidationError


def validate_merged_config(loader: ConfigLoader, overrides=None) -> List[ValidationError]:
    """Validate the merged configuration for a set of session overrides."""
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)
    print(f"🔍 Validating workout sequencer configuration in {loader.config_dir}...")

    all_valid = True

    try:
        errors = validate_merged_config(loader)
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print("✅ Configuration file is valid")
    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        all_valid = False

    print("\n📋 Testing session-level overrides...")
    test_overrides = {
        "rest": {"default_rest_sec": 60},
        "navigation": {"max_undo_depth": 10},
    }

    try:
        errors = validate_merged_config(loader, test_overrides)
        if errors:
            print("❌ Session override validation failed:")
            for error in errors:
                print(f"  • {error.field}: {error.message}")
            all_valid = False
        else:
            print("✅ Session override validation passed")
    except Exception as e:
        print(f"❌ Error testing session overrides: {e}")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
