"""
Data Models Package

This package contains all Pydantic models used in the Personal Finance Tracker.
All data flowing through the ledger must conform to these schemas.
"""

from finance_tracker.models.transaction import (
    Expense,
    Income,
    Transaction,
    TransactionKind,
    ValidationIssue,
    ValidationResult,
)
from finance_tracker.models.summary import (
    AllTimeSummary,
    MonthlySummary,
)
from finance_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Transaction models
    "Expense",
    "Income",
    "Transaction",
    "TransactionKind",
    "ValidationIssue",
    "ValidationResult",
    # Report models
    "AllTimeSummary",
    "MonthlySummary",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
