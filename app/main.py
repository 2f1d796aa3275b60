"""
Text Menu Frontend for the Personal Finance Tracker

This is the interactive shell the user works with. It only collects input,
hands it to the Account / ReportGenerator and prints what comes back. All
ledger rules live in the ``finance_tracker`` package.

DESIGN PRINCIPLES:
1. Trim every answer before using it
2. Re-prompt on an unusable amount instead of failing
3. Tell the user exactly why an entry was refused
4. Keep all state in the objects passed in (nothing global)
"""

from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from finance_tracker.accounts import Account
from finance_tracker.audit import AuditLogger, configure_logging, create_correlation_id
from finance_tracker.config import AppSettings, get_settings
from finance_tracker.models.transaction import Transaction, TransactionKind
from finance_tracker.reports import (
    ReportGenerator,
    format_all_time_report,
    format_menu,
    format_money,
    format_monthly_report,
)
from finance_tracker.validation import validate_format
from finance_tracker.validation.dates import DATE_FORMAT, MONTH_KEY_FORMAT


class AmountParseError(ValueError):
    """The text entered for an amount is not a positive number."""


def parse_amount(text: str) -> Decimal:
    """
    Parse a user-entered amount.

    Raises:
        AmountParseError: for empty, non-numeric, non-finite or
                          non-positive input
    """
    cleaned = text.strip()
    if not cleaned:
        raise AmountParseError("No amount entered")
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise AmountParseError(f"Not a number: {cleaned}")
    if not amount.is_finite():
        raise AmountParseError(f"Not a finite number: {cleaned}")
    if amount <= 0:
        raise AmountParseError(f"Amount must be positive: {cleaned}")
    return amount


class FinanceShell:
    """
    The menu loop.

    input_fn/output_fn default to ``input``/``print`` and can be replaced
    to drive the shell from a script.
    """

    def __init__(
        self,
        account: Account,
        report_generator: ReportGenerator,
        settings: Optional[AppSettings] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._account = account
        self._reports = report_generator
        self._settings = settings or get_settings()
        self._input = input_fn
        self._output = output_fn
        self._audit_logger = audit_logger

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _say(self, text: str) -> None:
        self._output(text)

    def _read_amount(self) -> Decimal:
        raw = self._ask("Amount: ")
        while True:
            try:
                return parse_amount(raw)
            except AmountParseError:
                if self._audit_logger:
                    self._audit_logger.log_invalid_input(prompt="amount", value=raw)
            raw = self._ask("Enter a valid positive amount: ")

    def add_transaction(self, kind: TransactionKind) -> bool:
        """Prompt for one entry and submit it to the account."""
        label = "Income" if kind is TransactionKind.INCOME else "Expense"
        self._say(f"Adding {label}...")

        amount = self._read_amount()
        category = self._ask("Category: ")
        date = self._ask(f"Date ({DATE_FORMAT}): ")
        if not validate_format(date):
            if self._audit_logger:
                self._audit_logger.log_invalid_input(prompt="date", value=date)
            self._say(f"Invalid date format! Use {DATE_FORMAT}.")
            return False
        description = self._ask("Description (optional): ")

        transaction = Transaction.create(
            kind=kind,
            amount=amount,
            category=category,
            date=date,
            description=description,
        )
        if not self._account.add_transaction(transaction):
            rejection = self._account.last_rejection
            if rejection is not None and rejection.message:
                self._say(rejection.message)
            return False

        self._say("Transaction added successfully!")
        self._say(f" Current Balance: {format_money(self._account.balance, self._settings)}")
        return True

    def show_monthly_report(self) -> None:
        month_year = self._ask(f"Enter month and year ({MONTH_KEY_FORMAT}): ")
        summary = self._reports.generate_monthly_report(self._account, month_year)
        self._say("")
        self._say(format_monthly_report(summary, self._account.balance, self._settings))

    def show_all_time_report(self) -> None:
        summary = self._reports.generate_all_time_report(self._account)
        self._say("")
        self._say(format_all_time_report(summary, self._settings))

    def run(self) -> int:
        """
        Loop until the user exits or input ends.

        Returns:
            Process exit code (always 0)
        """
        if self._audit_logger:
            self._audit_logger.log_session_started()

        try:
            while True:
                self._say("")
                self._say(format_menu(self._account.balance, self._settings))
                choice = self._ask("Choose an option: ")

                if choice == "1":
                    self.add_transaction(TransactionKind.INCOME)
                elif choice == "2":
                    self.add_transaction(TransactionKind.EXPENSE)
                elif choice == "3":
                    self.show_monthly_report()
                elif choice == "4":
                    self.show_all_time_report()
                elif choice == "5":
                    break
                else:
                    self._say("Invalid option. Try again.")
        except EOFError:
            self._say("")

        self._say("Goodbye!")
        if self._audit_logger:
            self._audit_logger.log_session_ended(
                transaction_count=len(self._account.transactions),
                balance=self._account.balance,
            )
        return 0


def create_shell(settings: Optional[AppSettings] = None) -> FinanceShell:
    """Wire up a fresh account, report generator and audit trail."""
    settings = settings or get_settings()
    audit_logger = AuditLogger(
        enabled=settings.audit_enabled,
        correlation_id=create_correlation_id(),
    )
    account = Account(audit_logger=audit_logger)
    report_generator = ReportGenerator(audit_logger=audit_logger)
    return FinanceShell(
        account=account,
        report_generator=report_generator,
        settings=settings,
        audit_logger=audit_logger,
    )


def main() -> None:
    """Main application entry point."""
    settings = get_settings()
    configure_logging(settings)
    raise SystemExit(create_shell(settings).run())


if __name__ == "__main__":
    main()
