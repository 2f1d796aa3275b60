"""
Transaction Admission Checks

DESIGN DECISION: Checks run in a fixed order and stop at the first failure:

1. Presence   - a transaction must be supplied at all
2. Amount     - must be strictly positive
3. Date       - must have the DD-MM-YYYY shape

The order only decides which message the user sees; any failure means the
transaction is refused before the ledger is touched.

IMPORTANT: Validation NEVER fixes a transaction. It reports why it was
refused and leaves the decision to the caller.
"""

from typing import Optional

from finance_tracker.models.transaction import (
    Transaction,
    ValidationIssue,
    ValidationResult,
)
from finance_tracker.validation.dates import DATE_FORMAT, validate_format


class TransactionValidator:
    """Decides whether a transaction may be admitted to an account."""

    def _check_present(
        self,
        transaction: Optional[Transaction],
    ) -> Optional[ValidationIssue]:
        if transaction is None:
            return ValidationIssue(
                field="transaction",
                issue_type="missing",
                message="Error: no transaction supplied.",
            )
        return None

    def _check_amount(self, transaction: Transaction) -> Optional[ValidationIssue]:
        if transaction.amount <= 0:
            return ValidationIssue(
                field="amount",
                issue_type="invalid_value",
                message="Error: amount must be positive.",
                suggested_fix="Enter an amount greater than zero",
            )
        return None

    def _check_date(self, transaction: Transaction) -> Optional[ValidationIssue]:
        if not validate_format(transaction.date):
            return ValidationIssue(
                field="date",
                issue_type="invalid_format",
                message="Error: invalid date format.",
                suggested_fix=f"Use {DATE_FORMAT}",
            )
        return None

    def validate(self, transaction: Optional[Transaction]) -> ValidationResult:
        """
        Run the admission checks in order.

        Returns:
            ValidationResult with at most one issue
        """
        issue = self._check_present(transaction)
        if issue is None:
            issue = self._check_amount(transaction) or self._check_date(transaction)

        return ValidationResult(
            transaction_id=transaction.id if transaction is not None else None,
            is_valid=issue is None,
            issues=[issue] if issue else [],
        )
