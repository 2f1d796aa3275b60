"""
Report Generation

DESIGN DECISION: Reports are pure reads of the account's current state.
Every call re-scans the (possibly month-filtered) history; nothing is
cached or updated incrementally. For a single interactive user the
history is small enough that this is always fast.

Categories are grouped verbatim: "Food" and "food" are different buckets.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Optional

from finance_tracker.accounts import Account
from finance_tracker.audit import AuditLogger
from finance_tracker.models.summary import AllTimeSummary, MonthlySummary
from finance_tracker.models.transaction import Transaction


def _totals(transactions: Iterable[Transaction]) -> tuple[Decimal, Decimal, int]:
    income = Decimal("0")
    expense = Decimal("0")
    count = 0
    for tx in transactions:
        if tx.is_income:
            income += tx.amount
        else:
            expense += tx.amount
        count += 1
    return income, expense, count


class ReportGenerator:
    """Builds monthly and all-time summaries from an Account."""

    def __init__(self, audit_logger: Optional[AuditLogger] = None):
        self._audit_logger = audit_logger

    def generate_monthly_report(
        self,
        account: Account,
        month_year: str,
    ) -> MonthlySummary:
        """
        Summarise the transactions dated in ``month_year`` (MM-YYYY).

        The month string is used as-is; a malformed value just matches
        nothing.
        """
        transactions = account.get_transactions_for_month(month_year)

        by_category_income: dict[str, Decimal] = defaultdict(Decimal)
        by_category_expense: dict[str, Decimal] = defaultdict(Decimal)
        for tx in transactions:
            if tx.is_income:
                by_category_income[tx.category] += tx.amount
            else:
                by_category_expense[tx.category] += tx.amount

        total_income, total_expense, count = _totals(transactions)

        if self._audit_logger:
            self._audit_logger.log_monthly_report(
                month_key=month_year,
                transaction_count=count,
            )

        return MonthlySummary(
            month_key=month_year,
            total_income=total_income,
            total_expense=total_expense,
            net=total_income - total_expense,
            by_category_income=dict(by_category_income),
            by_category_expense=dict(by_category_expense),
            transaction_count=count,
        )

    def generate_all_time_report(self, account: Account) -> AllTimeSummary:
        """Summarise the whole history. No per-category breakdown."""
        income, expense, count = _totals(account.get_transactions())

        if self._audit_logger:
            self._audit_logger.log_all_time_report(transaction_count=count)

        return AllTimeSummary(
            income=income,
            expense=expense,
            net=income - expense,
            transaction_count=count,
        )
