from decimal import Decimal

from models.account import Account, AccountKind, to_cents


def make_account(balance="0.00", kind=AccountKind.SAVINGS):
    return Account(
        account_number="A1",
        holder_name="Alice",
        kind=kind,
        balance=Decimal(balance),
    )


class TestAccountKind:
    """Tests for AccountKind."""

    def test_labels(self):
        assert AccountKind.SAVINGS.label == "Savings"
        assert AccountKind.CURRENT.label == "Current"

    def test_from_string_is_case_insensitive(self):
        assert AccountKind.from_string("Savings") == AccountKind.SAVINGS
        assert AccountKind.from_string("savings") == AccountKind.SAVINGS
        assert AccountKind.from_string("SAVINGS") == AccountKind.SAVINGS

    def test_from_string_defaults_to_current(self):
        """Anything that is not savings becomes a current account."""
        assert AccountKind.from_string("Current") == AccountKind.CURRENT
        assert AccountKind.from_string("checking") == AccountKind.CURRENT
        assert AccountKind.from_string("") == AccountKind.CURRENT


class TestAccount:
    """Tests for Account balance rules."""

    def test_new_account_has_zero_balance(self):
        account = Account("A1", "Alice", AccountKind.CURRENT)

        assert account.balance == Decimal("0.00")
        assert account.account_type_label == "Current"

    def test_deposit_positive_amount(self, caplog):
        account = make_account()

        assert account.deposit(Decimal("500.00")) is True
        assert account.balance == Decimal("500.00")
        assert "Deposited 500.00 successfully." in caplog.text

    def test_deposit_non_positive_amount_is_rejected(self, caplog):
        account = make_account("100.00")

        assert account.deposit(Decimal("0")) is False
        assert account.deposit(Decimal("-5.00")) is False
        assert account.balance == Decimal("100.00")
        assert "Deposit amount must be positive." in caplog.text

    def test_withdraw_within_balance(self):
        account = make_account("500.00")

        assert account.withdraw(Decimal("200.00")) is True
        assert account.balance == Decimal("300.00")

    def test_withdraw_entire_balance(self):
        account = make_account("42.50")

        assert account.withdraw(Decimal("42.50")) is True
        assert account.balance == Decimal("0.00")

    def test_withdraw_more_than_balance(self, caplog):
        account = make_account("300.00")

        assert account.withdraw(Decimal("1000.00")) is False
        assert account.balance == Decimal("300.00")
        assert "Insufficient balance." in caplog.text

    def test_withdraw_non_positive_amount(self, caplog):
        account = make_account("300.00")

        assert account.withdraw(Decimal("0")) is False
        assert account.withdraw(Decimal("-1")) is False
        assert account.balance == Decimal("300.00")
        assert "Withdrawal amount must be positive." in caplog.text

    def test_balance_never_negative(self):
        """Mixed sequence of valid and invalid operations keeps balance >= 0."""
        account = make_account()
        operations = [
            ("deposit", "10.00"),
            ("withdraw", "15.00"),
            ("withdraw", "-3.00"),
            ("deposit", "-20.00"),
            ("withdraw", "10.00"),
            ("withdraw", "0.01"),
            ("deposit", "0.01"),
            ("withdraw", "0.01"),
        ]

        for name, amount in operations:
            getattr(account, name)(Decimal(amount))
            assert account.balance >= 0

        assert account.balance == Decimal("0.00")

    def test_sub_cent_deposit_is_rejected(self, caplog):
        account = make_account()

        assert account.deposit(Decimal("0.006")) is False
        assert account.balance == Decimal("0.00")
        assert "Deposit amount must be a whole number of cents" in caplog.text

    def test_sub_cent_withdrawal_is_rejected(self):
        account = make_account("1.00")

        assert account.withdraw(Decimal("0.005")) is False
        assert account.balance == Decimal("1.00")

    def test_amount_too_large_for_cents_is_rejected(self):
        account = make_account()

        assert account.deposit(Decimal("1e30")) is False
        assert account.withdraw(Decimal("1e30")) is False
        assert account.balance == Decimal("0.00")

    def test_deposit_past_maximum_balance_is_rejected(self, caplog):
        account = make_account("99999999999999999999999999.99")

        assert account.deposit(Decimal("99999999999999999999999999.99")) is False
        assert account.balance == Decimal("99999999999999999999999999.99")
        assert "Deposit would exceed the maximum balance." in caplog.text

    def test_non_finite_amounts_are_rejected(self):
        account = make_account("5.00")

        assert account.deposit(Decimal("NaN")) is False
        assert account.deposit(Decimal("Infinity")) is False
        assert account.withdraw(Decimal("NaN")) is False
        assert account.balance == Decimal("5.00")

    def test_balance_stays_at_cents(self):
        account = make_account()

        account.deposit(Decimal("10.5"))
        account.withdraw(Decimal("0.25"))

        assert str(account.balance) == "10.25"


class TestToCents:
    """Tests for to_cents."""

    def test_exact_cents(self):
        assert str(to_cents(Decimal("3"))) == "3.00"
        assert str(to_cents(Decimal("0.10"))) == "0.10"

    def test_rejects_extra_precision(self):
        assert to_cents(Decimal("0.001")) is None

    def test_rejects_out_of_range(self):
        assert to_cents(Decimal("1e30")) is None
        assert to_cents(Decimal("NaN")) is None
