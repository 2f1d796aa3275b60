"""
The Ledger Account

An Account owns a running balance and the append-only history of the
transactions that produced it.

GUARANTEES:
- The balance always equals the sum of the admitted transactions' effects,
  starting from zero
- A refused transaction leaves balance and history untouched
- Admitted transactions are never removed or replaced

DESIGN DECISION: An Account is an ordinary object that the caller constructs
and passes around. There is no module-level account.
"""

from decimal import Decimal
from typing import Optional

from finance_tracker.audit import AuditLogger
from finance_tracker.models.transaction import Transaction, ValidationResult
from finance_tracker.validation import TransactionValidator, month_key


class Account:
    """A single in-memory ledger."""

    def __init__(
        self,
        validator: Optional[TransactionValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._balance = Decimal("0")
        self._transactions: list[Transaction] = []
        self._validator = validator or TransactionValidator()
        self._audit_logger = audit_logger
        self._last_rejection: Optional[ValidationResult] = None

    # -------------------------------------------------------------------------
    # Balance update (only Transaction.apply calls this)
    # -------------------------------------------------------------------------

    def _set_balance(self, balance: Decimal) -> None:
        self._balance = balance

    # -------------------------------------------------------------------------
    # Ledger operations
    # -------------------------------------------------------------------------

    def add_transaction(self, transaction: Optional[Transaction]) -> bool:
        """
        Validate and admit a transaction.

        Checks, in order: transaction present, amount positive, date in
        DD-MM-YYYY form. The first failing check refuses the transaction
        and nothing is mutated.

        Returns:
            True if the transaction was applied and recorded
        """
        result = self._validator.validate(transaction)

        if not result.is_valid:
            self._last_rejection = result
            if self._audit_logger:
                self._audit_logger.log_transaction_rejected(
                    transaction_id=result.transaction_id,
                    issue_type=result.issue_type,
                    reason=result.message,
                )
            return False

        transaction.apply(self)
        self._transactions.append(transaction)
        self._last_rejection = None

        if self._audit_logger:
            self._audit_logger.log_transaction_added(
                transaction_id=transaction.id,
                kind=transaction.kind.value,
                amount=transaction.amount,
                category=transaction.category,
                balance=self._balance,
            )
        return True

    @property
    def last_rejection(self) -> Optional[ValidationResult]:
        """Why the most recent ``add_transaction`` call failed, if it did."""
        return self._last_rejection

    @property
    def balance(self) -> Decimal:
        return self._balance

    def get_balance(self) -> Decimal:
        return self._balance

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Admitted transactions in arrival order."""
        return tuple(self._transactions)

    def get_transactions(self) -> tuple[Transaction, ...]:
        return self.transactions

    def get_transactions_for_month(self, month_year: str) -> tuple[Transaction, ...]:
        """Admitted transactions whose date falls in ``month_year`` (MM-YYYY)."""
        return tuple(
            tx for tx in self._transactions
            if month_key(tx.date) == month_year
        )
