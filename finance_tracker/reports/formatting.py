"""Turn summaries and balances into the text the shell prints."""

from decimal import Decimal
from typing import Mapping

from finance_tracker.config import AppSettings
from finance_tracker.models.summary import AllTimeSummary, MonthlySummary

RULE = "=" * 28
MENU_RULE = "-" * 32


def format_amount(amount: Decimal, settings: AppSettings) -> str:
    return f"{amount:,.{settings.amount_decimal_places}f}"


def format_money(amount: Decimal, settings: AppSettings) -> str:
    """Return ``amount`` with the currency symbol, e.g. ``Rs.750.00``."""
    return f"{settings.currency_symbol}{format_amount(amount, settings)}"


def _category_lines(totals: Mapping[str, Decimal], settings: AppSettings) -> list[str]:
    if not totals:
        return ["None"]
    return [
        f"  {category}: {format_amount(amount, settings)}"
        for category, amount in totals.items()
    ]


def format_monthly_report(
    summary: MonthlySummary,
    balance: Decimal,
    settings: AppSettings,
) -> str:
    lines = [
        f"===== Monthly Report ({summary.month_key}) =====",
        f"Total Income : {format_amount(summary.total_income, settings)}",
        f"Total Expense: {format_amount(summary.total_expense, settings)}",
        f"Net Savings  : {format_amount(summary.net, settings)}",
        "",
        "-- Income by Category --",
        *_category_lines(summary.by_category_income, settings),
        "",
        "-- Expense by Category --",
        *_category_lines(summary.by_category_expense, settings),
        RULE,
        f"Current Balance: {format_money(balance, settings)}",
    ]
    return "\n".join(lines)


def format_all_time_report(summary: AllTimeSummary, settings: AppSettings) -> str:
    lines = [
        "===== All-Time Summary =====",
        f"Total Income : {format_amount(summary.income, settings)}",
        f"Total Expense: {format_amount(summary.expense, settings)}",
        f"Net Savings  : {format_amount(summary.net, settings)}",
        RULE,
    ]
    return "\n".join(lines)


def format_menu(balance: Decimal, settings: AppSettings) -> str:
    lines = [
        MENU_RULE,
        "   Personal Finance Tracker     ",
        MENU_RULE,
        f"Current Balance: {format_money(balance, settings)}",
        MENU_RULE,
        "1. Add Income",
        "2. Add Expense",
        "3. View Monthly Report",
        "4. View All-time Summary",
        "5. Exit",
    ]
    return "\n".join(lines)
