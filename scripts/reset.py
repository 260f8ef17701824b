#!/usr/bin/env python3
"""Reset script for Bankbook.

This script will delete the account store and the log directory so the
next run starts with no accounts.
"""

import shutil
import sys

from config import load_config


def reset():
    """Reset the application state."""
    print("Bankbook Reset Script")
    print("=" * 50)

    config = load_config()

    if not config.enable_reset:
        print("\nReset is disabled in configuration (enable_reset=false).")
        print("To enable reset, set enable_reset=true in ~/.config/bankbook.toml")
        sys.exit(1)

    print(f"\nAccount store: {config.store_path.resolve()}")
    print(f"Logs: {config.log_dir}")

    response = input("\nThis will delete ALL accounts. Continue? (yes/no): ")
    if response.lower() != "yes":
        print("Reset cancelled.")
        sys.exit(0)

    if config.store_path.exists():
        config.store_path.unlink()
        print("✓ Account store deleted")
    else:
        print(f"✓ Account store does not exist: {config.store_path}")

    if config.log_dir.exists():
        shutil.rmtree(config.log_dir)
        print("✓ Log directory deleted")

    print("\n" + "=" * 50)
    print("Reset complete!")


if __name__ == "__main__":
    reset()
