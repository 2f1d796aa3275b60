"""
Core Data Models for the Personal Finance Tracker

These models define the records that flow through the ledger:
1. Transactions (Income / Expense) as submitted by the user
2. Validation results explaining why a transaction was refused

DESIGN DECISION: Transactions are frozen Pydantic models that perform NO
business validation on construction. A zero amount or a malformed date can
be built; it is the Account that refuses it on admission. This keeps the
refusal path in one place and lets the shell report a precise reason.
"""

from decimal import Decimal
from enum import Enum
from operator import add, sub
from typing import TYPE_CHECKING, Literal, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from finance_tracker.accounts.account import Account


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionKind(str, Enum):
    """
    The two variants of a transaction.

    The report generator buckets totals and categories by this value.
    """
    INCOME = "income"
    EXPENSE = "expense"


# Signed effect of each variant on a running balance
_EFFECTS = {
    TransactionKind.INCOME: add,
    TransactionKind.EXPENSE: sub,
}


# =============================================================================
# TRANSACTION MODELS
# =============================================================================

class Transaction(BaseModel):
    """
    A single ledger entry.

    Immutable once created. Use the ``Income`` / ``Expense`` variants
    (or ``Transaction.create``) rather than setting ``kind`` by hand.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique transaction ID"
    )
    kind: TransactionKind = Field(
        ...,
        description="Income or expense"
    )
    amount: Decimal = Field(
        ...,
        description="Amount in the single ledger currency"
    )
    category: str = Field(
        default="",
        description="Free-text category, used verbatim for grouping"
    )
    date: str = Field(
        ...,
        description="Date as entered, expected DD-MM-YYYY"
    )
    description: str = Field(
        default="",
        description="Optional note"
    )

    @classmethod
    def create(
        cls,
        kind: TransactionKind,
        amount: Decimal,
        category: str,
        date: str,
        description: str = "",
    ) -> "Transaction":
        """Build the variant matching ``kind``."""
        variant = Income if TransactionKind(kind) is TransactionKind.INCOME else Expense
        return variant(
            amount=amount,
            category=category,
            date=date,
            description=description,
        )

    @property
    def is_income(self) -> bool:
        return self.kind is TransactionKind.INCOME

    @property
    def is_expense(self) -> bool:
        return self.kind is TransactionKind.EXPENSE

    def effect_on(self, balance: Decimal) -> Decimal:
        """Return the balance that results from applying this transaction."""
        return _EFFECTS[self.kind](balance, self.amount)

    def apply(self, account: "Account") -> None:
        """
        Move the account balance by this transaction's amount.

        This is the only way a transaction affects the ledger.
        """
        account._set_balance(self.effect_on(account.balance))


class Income(Transaction):
    """Money received. Increases the balance."""
    kind: Literal[TransactionKind.INCOME] = TransactionKind.INCOME


class Expense(Transaction):
    """Money spent. Decreases the balance."""
    kind: Literal[TransactionKind.EXPENSE] = TransactionKind.EXPENSE


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single reason a transaction cannot be admitted."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        pattern="^(missing|invalid_value|invalid_format)$",
        description="Type of issue"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


class ValidationResult(BaseModel):
    """
    Outcome of the admission checks for one transaction.

    Checks short-circuit, so a refused transaction carries exactly one issue.
    """

    transaction_id: Optional[UUID] = Field(
        default=None,
        description="ID of the checked transaction (None when it was absent)"
    )
    is_valid: bool = Field(
        ...,
        description="Can the transaction be admitted?"
    )
    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="Issues found"
    )

    @property
    def message(self) -> Optional[str]:
        """Message of the first issue, if any."""
        return self.issues[0].message if self.issues else None

    @property
    def issue_type(self) -> Optional[str]:
        return self.issues[0].issue_type if self.issues else None
