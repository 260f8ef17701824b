"""Exception hierarchy for Bankbook."""


class BankbookError(Exception):
    """Base exception for all Bankbook errors."""


class MalformedRecordError(BankbookError):
    """Raised when a backing store line cannot be parsed into an account."""

    def __init__(self, line_num: int, line: str, reason: str):
        self.line_num = line_num
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed record at line {line_num}: {line!r} ({reason})")
