"""Flat text file persistence for the account directory.

Each account is stored as one line:

    <account number>,<holder name>,<Savings|Current>,<balance to 2 places>

There is no header and no escaping. Account numbers and holder names must not
contain commas or line breaks; lines that do not split into exactly four
fields, or that are not valid UTF-8, are treated as malformed on load.
"""

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, Iterable

from exceptions import MalformedRecordError
from logger import get_logger
from models.account import CENTS, Account, AccountKind

logger = get_logger()

FIELD_COUNT = 4
RESERVED_CHARACTERS = (",", "\n", "\r")


def is_storable_field(value: str) -> bool:
    """Check that a text field can be written without breaking the record."""
    return not any(char in value for char in RESERVED_CHARACTERS)


def account_to_record(account: Account) -> str:
    """Serialize an account into a single store line (without newline)."""
    balance = account.balance.quantize(CENTS)
    return (
        f"{account.account_number},{account.holder_name},"
        f"{account.account_type_label},{balance}"
    )


def record_to_account(line: str, line_num: int = 0) -> Account:
    """Parse a single store line into an Account.

    Args:
        line: Record text, trailing newline allowed.
        line_num: Position in the file, used for error reporting.

    Returns:
        Account object.

    Raises:
        MalformedRecordError: If the field count, account number or balance is invalid.
    """
    raw = line.rstrip("\r\n")
    parts = raw.split(",")
    if len(parts) != FIELD_COUNT:
        raise MalformedRecordError(
            line_num, raw, f"expected {FIELD_COUNT} fields, got {len(parts)}"
        )

    account_number, holder_name, type_label, balance_str = parts
    if not account_number:
        raise MalformedRecordError(line_num, raw, "empty account number")

    try:
        balance = Decimal(balance_str.strip())
        if not balance.is_finite() or balance < 0:
            raise InvalidOperation
        balance = balance.quantize(CENTS)
    except InvalidOperation:
        raise MalformedRecordError(
            line_num, raw, f"invalid balance '{balance_str}'"
        ) from None

    kind = AccountKind.SAVINGS if type_label == AccountKind.SAVINGS.label else AccountKind.CURRENT

    return Account(
        account_number=account_number,
        holder_name=holder_name,
        kind=kind,
        balance=balance,
    )


def decode_record(data: bytes, line_num: int = 0) -> str:
    """Decode one raw store line as UTF-8.

    Raises:
        MalformedRecordError: If the bytes are not valid UTF-8.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raw = data.decode("utf-8", errors="replace").rstrip("\r\n")
        raise MalformedRecordError(line_num, raw, "not valid UTF-8") from None


class AccountStore:
    """Reads and rewrites the whole account set in a flat text file.

    Args:
        path: Location of the backing store. Relative paths resolve against
            the working directory at access time.
        strict: Raise on the first malformed record instead of skipping it.
    """

    def __init__(self, path: Path, strict: bool = False):
        self.path = Path(path)
        self.strict = strict

    @classmethod
    def from_config(cls, config) -> "AccountStore":
        return cls(config.store_path, strict=config.strict_load)

    def load_all(self) -> Dict[str, Account]:
        """Load every account from the backing store.

        Returns:
            Mapping of account number to Account in file order. Empty if the
            store does not exist or cannot be read.

        Raises:
            MalformedRecordError: On a malformed record when strict is set.
        """
        accounts: Dict[str, Account] = {}

        try:
            f = open(self.path, "rb")
        except FileNotFoundError:
            logger.info("No previous data found. Starting fresh.")
            return accounts
        except OSError as e:
            logger.warning(f"Could not open {self.path}: {e}. Starting fresh.")
            return accounts

        with f:
            for line_num, data in enumerate(f, start=1):
                if not data.strip():
                    continue

                try:
                    account = record_to_account(decode_record(data, line_num), line_num)
                except MalformedRecordError as e:
                    if self.strict:
                        raise
                    logger.warning(f"Skipping {e}")
                    continue

                if account.account_number in accounts:
                    logger.warning(
                        f"Duplicate account {account.account_number} at line {line_num}, "
                        "keeping the later record"
                    )
                accounts[account.account_number] = account

        logger.debug(f"Loaded {len(accounts)} account(s) from {self.path}")
        return accounts

    def save_all(self, accounts: Iterable[Account]) -> bool:
        """Overwrite the backing store with one record per account.

        Args:
            accounts: Accounts in the order they should be written.

        Returns:
            True if the file was written, False if the write failed.
        """
        try:
            lines = [account_to_record(account) + "\n" for account in accounts]
        except InvalidOperation:
            logger.error("Failed to save account data: balance out of range")
            return False

        try:
            if self.path.parent != Path("."):
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8", newline="\n") as f:
                f.writelines(lines)
        except OSError as e:
            logger.error(f"Failed to save account data: {e}")
            return False

        logger.debug(f"Saved {len(lines)} account(s) to {self.path}")
        return True
