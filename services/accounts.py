"""Account directory service."""

from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Union

from logger import get_logger
from models.account import Account, AccountKind
from storage.flat_file import is_storable_field

logger = get_logger()

Amount = Union[Decimal, int, str]


def _to_decimal(amount: Amount) -> Optional[Decimal]:
    if isinstance(amount, Decimal):
        return amount
    try:
        return Decimal(str(amount).strip())
    except InvalidOperation:
        logger.warning(f"Invalid amount '{amount}'.")
        return None


class AccountService:
    """Service for managing accounts.

    Holds the in-memory directory of accounts keyed by account number. The
    directory is loaded once from the store when the service is created and
    the full set is written back after every successful mutation.
    """

    def __init__(self, store):
        """Initialize the account service.

        Args:
            store: AccountStore used to load and persist the directory.
        """
        self.store = store
        self.accounts: Dict[str, Account] = store.load_all()

    def _persist(self) -> bool:
        return self.store.save_all(self.accounts.values())

    def create_account(
        self, account_number: str, holder_name: str, kind: str
    ) -> Optional[Account]:
        """Create and persist a new account with a zero balance.

        Args:
            account_number: Unique account number.
            holder_name: Account holder's name.
            kind: "Savings" (any case) for a savings account, anything else
                creates a current account.

        Returns:
            The created Account, or None if the number is taken or a field
            cannot be stored.
        """
        if not account_number:
            logger.warning("Account number cannot be empty.")
            return None
        if not (is_storable_field(account_number) and is_storable_field(holder_name)):
            logger.warning(
                "Account number and holder name must not contain commas or line breaks."
            )
            return None
        if account_number in self.accounts:
            logger.warning("Account with this number already exists.")
            return None

        account = Account(
            account_number=account_number,
            holder_name=holder_name,
            kind=AccountKind.from_string(kind),
        )
        self.accounts[account_number] = account
        self._persist()
        logger.info("Account created successfully.")
        return account

    def find(self, account_number: str) -> Optional[Account]:
        """Get a single account by number without reporting anything."""
        return self.accounts.get(account_number)

    def deposit(self, account_number: str, amount: Amount) -> bool:
        """Deposit into an account and persist the directory.

        Returns:
            True if the deposit was applied, False otherwise.
        """
        account = self.accounts.get(account_number)
        if account is None:
            logger.warning("Account not found.")
            return False

        amount = _to_decimal(amount)
        if amount is None or not account.deposit(amount):
            return False

        self._persist()
        logger.info(f"Deposited {amount:.2f} successfully into account {account_number}")
        return True

    def withdraw(self, account_number: str, amount: Amount) -> bool:
        """Withdraw from an account and persist the directory.

        Returns:
            True if the withdrawal was applied, False otherwise.
        """
        account = self.accounts.get(account_number)
        if account is None:
            logger.warning("Account not found.")
            return False

        amount = _to_decimal(amount)
        if amount is None or not account.withdraw(amount):
            return False

        self._persist()
        return True

    def check_balance(self, account_number: str) -> Optional[Account]:
        """Look up an account for display.

        Returns:
            Account object if found, None otherwise.
        """
        account = self.accounts.get(account_number)
        if account is None:
            logger.warning("Account not found.")
        return account

    def list_all(self) -> List[Account]:
        """Get all accounts in directory order."""
        if not self.accounts:
            logger.info("No accounts found.")
        return list(self.accounts.values())
