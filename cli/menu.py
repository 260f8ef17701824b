#!/usr/bin/env python3
"""Interactive numbered menu over the account service."""

from cli.accounts import format_account, parse_amount
from logger import get_logger

logger = get_logger()

MENU = """
==== BANK MANAGEMENT SYSTEM ====
1. Create Account
2. Deposit
3. Withdraw
4. Check Balance
5. Show All Accounts
6. Exit"""


def _read_amount(read, label):
    text = read(label)
    amount = parse_amount(text)
    if amount is None:
        logger.error(f"Invalid amount '{text.strip()}'.")
    return amount


def handle_choice(choice, services, read):
    """Run one menu option.

    Returns:
        False when the user chose Exit, True otherwise.
    """
    symbol = services.config.currency_symbol

    if choice == "1":
        account_number = read("Enter Account Number: ").strip()
        holder_name = read("Enter Holder Name: ").strip()
        account_type = read("Account Type (Savings/Current): ").strip()
        services.accounts.create_account(account_number, holder_name, account_type)
    elif choice == "2":
        account_number = read("Enter Account Number: ").strip()
        amount = _read_amount(read, "Enter Amount to Deposit: ")
        if amount is not None:
            services.accounts.deposit(account_number, amount)
    elif choice == "3":
        account_number = read("Enter Account Number: ").strip()
        amount = _read_amount(read, "Enter Amount to Withdraw: ")
        if amount is not None:
            services.accounts.withdraw(account_number, amount)
    elif choice == "4":
        account_number = read("Enter Account Number: ").strip()
        account = services.accounts.check_balance(account_number)
        if account is not None:
            logger.info(format_account(account, symbol))
    elif choice == "5":
        for account in services.accounts.list_all():
            logger.info(format_account(account, symbol))
    elif choice == "6":
        logger.info("Thank you for using the system.")
        return False
    else:
        logger.warning("Invalid choice. Try again.")
    return True


def run_menu(services, read=input):
    """Run the menu loop until the user picks Exit or input ends.

    Args:
        services: Services container.
        read: Prompt function, defaults to input().
    """
    while True:
        print(MENU)
        try:
            choice = read("Choose an option: ").strip()
            if not handle_choice(choice, services, read):
                return
        except EOFError:
            # Input closed, possibly in the middle of an operation
            return


def cmd_menu(args, services):
    """Start the interactive menu."""
    run_menu(services)


def setup_parser(subparsers):
    """Setup menu subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "menu",
        help="Interactive menu",
        description="Run the numbered bank management menu",
    )
    parser.set_defaults(func=cmd_menu)
