"""
Report Models

Summaries are computed on demand from the ledger and never stored.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class MonthlySummary(BaseModel):
    """
    Totals for one calendar month, with a per-category breakdown.

    A category that appears as both income and expense is tracked
    independently in each mapping.
    """
    model_config = ConfigDict(frozen=True)

    month_key: str = Field(
        ...,
        description="Month the summary covers, MM-YYYY"
    )
    total_income: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")
    net: Decimal = Field(
        default=Decimal("0"),
        description="total_income - total_expense"
    )
    by_category_income: dict[str, Decimal] = Field(default_factory=dict)
    by_category_expense: dict[str, Decimal] = Field(default_factory=dict)
    transaction_count: int = Field(default=0, ge=0)

    @property
    def is_empty(self) -> bool:
        return self.transaction_count == 0


class AllTimeSummary(BaseModel):
    """Totals over the whole ledger. No category breakdown."""
    model_config = ConfigDict(frozen=True)

    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    net: Decimal = Decimal("0")
    transaction_count: int = Field(default=0, ge=0)
