#!/usr/bin/env python3

import sys
from decimal import Decimal, InvalidOperation
from typing import Optional

from logger import get_logger

logger = get_logger()


def format_account(account, currency_symbol: str) -> str:
    """Render an account as a single display line."""
    return (
        f"Account: {account.account_number} | Holder: {account.holder_name} | "
        f"Type: {account.account_type_label} | "
        f"Balance: {currency_symbol}{account.balance:.2f}"
    )


def parse_amount(text: str) -> Optional[Decimal]:
    """Parse a user-entered amount, returning None if it is not a number."""
    try:
        amount = Decimal(text.strip())
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    return amount


def _prompt(value: Optional[str], label: str) -> str:
    if value is not None:
        return value.strip()
    return input(f"{label}: ").strip()


def _prompt_amount(value: Optional[str], label: str) -> Decimal:
    text = _prompt(value, label)
    amount = parse_amount(text)
    if amount is None:
        logger.error(f"Invalid amount '{text}'.")
        sys.exit(1)
    return amount


def cmd_list(args, services):
    """List all accounts."""
    accounts = services.accounts.list_all()
    if not accounts:
        return

    symbol = services.config.currency_symbol
    for account in accounts:
        logger.info(format_account(account, symbol))

    logger.info(f"Total accounts: {len(accounts)}")


def cmd_create(args, services):
    """Create a new account, prompting for any field not given."""
    account_number = _prompt(args.number, "Enter Account Number")
    if not account_number:
        logger.error("Account number cannot be empty.")
        sys.exit(1)

    holder_name = _prompt(args.holder, "Enter Holder Name")
    account_type = _prompt(args.type, "Account Type (Savings/Current)")

    if services.accounts.create_account(account_number, holder_name, account_type) is None:
        sys.exit(1)


def cmd_deposit(args, services):
    """Deposit into an account."""
    account_number = _prompt(args.number, "Enter Account Number")
    amount = _prompt_amount(args.amount, "Enter Amount to Deposit")

    if not services.accounts.deposit(account_number, amount):
        sys.exit(1)


def cmd_withdraw(args, services):
    """Withdraw from an account."""
    account_number = _prompt(args.number, "Enter Account Number")
    amount = _prompt_amount(args.amount, "Enter Amount to Withdraw")

    if not services.accounts.withdraw(account_number, amount):
        sys.exit(1)


def cmd_balance(args, services):
    """Show one account's balance."""
    account_number = _prompt(args.number, "Enter Account Number")

    account = services.accounts.check_balance(account_number)
    if account is None:
        sys.exit(1)

    logger.info(format_account(account, services.config.currency_symbol))


def setup_parser(subparsers):
    """Setup accounts subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "accounts",
        help="Manage accounts",
        description="Create accounts, move money and show balances",
    )

    accounts_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available account commands",
        dest="subcommand",
        required=True,
    )

    list_parser = accounts_subparsers.add_parser("list", help="List all accounts")
    list_parser.set_defaults(func=cmd_list)

    create_parser = accounts_subparsers.add_parser(
        "create", help="Create a new account"
    )
    create_parser.add_argument("--number", help="Account number")
    create_parser.add_argument("--holder", help="Holder name")
    create_parser.add_argument("--type", help="Savings or Current")
    create_parser.set_defaults(func=cmd_create)

    deposit_parser = accounts_subparsers.add_parser(
        "deposit", help="Deposit into an account"
    )
    deposit_parser.add_argument("--number", help="Account number")
    deposit_parser.add_argument("--amount", help="Amount to deposit")
    deposit_parser.set_defaults(func=cmd_deposit)

    withdraw_parser = accounts_subparsers.add_parser(
        "withdraw", help="Withdraw from an account"
    )
    withdraw_parser.add_argument("--number", help="Account number")
    withdraw_parser.add_argument("--amount", help="Amount to withdraw")
    withdraw_parser.set_defaults(func=cmd_withdraw)

    balance_parser = accounts_subparsers.add_parser(
        "balance", help="Show an account's balance"
    )
    balance_parser.add_argument("--number", help="Account number")
    balance_parser.set_defaults(func=cmd_balance)
