#!/usr/bin/env python3
"""
Bankbook CLI - Command-line interface for managing bank accounts.

Usage:
    python -m cli <command> [subcommand] [options]

Commands:
    accounts     Create accounts, deposit, withdraw, show balances
    menu         Interactive numbered menu

Examples:
    python -m cli accounts list
    python -m cli accounts create --number A1 --holder Alice --type Savings
    python -m cli accounts deposit --number A1 --amount 500.00
    python -m cli accounts balance --number A1
    python -m cli menu
"""

import sys
import argparse
from cli import accounts, menu
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Bankbook - Console bank account manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    accounts.setup_parser(subparsers)
    menu.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)
            services = Services(config)
            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
