from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional

from logger import get_logger

logger = get_logger()

CENTS = Decimal("0.01")


def to_cents(value: Decimal) -> Optional[Decimal]:
    """Return value with exactly two decimal places, or None if that changes it.

    None also covers values too large to hold at cent precision.
    """
    if not value.is_finite():
        return None
    try:
        cents = value.quantize(CENTS)
    except InvalidOperation:
        return None
    if cents != value:
        return None
    return cents


class AccountKind(str, Enum):
    SAVINGS = "Savings"
    CURRENT = "Current"

    @property
    def label(self) -> str:
        """Display label, also used as the stored type field."""
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "AccountKind":
        """Map user input to a kind; anything other than "savings" is Current."""
        if value.strip().lower() == cls.SAVINGS.value.lower():
            return cls.SAVINGS
        return cls.CURRENT


@dataclass
class Account:
    account_number: str
    holder_name: str
    kind: AccountKind
    balance: Decimal = field(default_factory=lambda: Decimal("0.00"))

    @property
    def account_type_label(self) -> str:
        return self.kind.label

    def _valid_amount(self, amount: Decimal, action: str) -> Optional[Decimal]:
        if not amount.is_finite() or amount <= 0:
            logger.warning(f"{action} amount must be positive.")
            return None

        cents = to_cents(amount)
        if cents is None:
            logger.warning(
                f"{action} amount must be a whole number of cents within range."
            )
        return cents

    def deposit(self, amount: Decimal) -> bool:
        """Add a positive amount to the balance.

        Returns:
            True if the balance changed, False if the amount was rejected.
        """
        amount = self._valid_amount(amount, "Deposit")
        if amount is None:
            return False

        balance = to_cents(self.balance + amount)
        if balance is None:
            logger.warning("Deposit would exceed the maximum balance.")
            return False

        self.balance = balance
        logger.info(f"Deposited {amount:.2f} successfully.")
        return True

    def withdraw(self, amount: Decimal) -> bool:
        """Take a positive amount out of the balance if funds allow.

        Returns:
            True if the balance changed, False if the amount was rejected.
        """
        amount = self._valid_amount(amount, "Withdrawal")
        if amount is None:
            return False
        if amount > self.balance:
            logger.warning("Insufficient balance.")
            return False

        self.balance -= amount
        logger.info(f"Withdrawn {amount:.2f} successfully.")
        return True
