"""
Audit Models for the Personal Finance Tracker

Every admission, refusal and report is recorded as an event. This gives:
1. Traceability of how the balance got where it is
2. Debugging information when an entry is refused
3. A session history the user can inspect

DESIGN DECISION: The audit trail is append-only and lives for the process
lifetime only. Nothing here is persisted.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Session
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"

    # Ledger
    TRANSACTION_ADDED = "transaction_added"
    TRANSACTION_REJECTED = "transaction_rejected"

    # Reports
    MONTHLY_REPORT_GENERATED = "monthly_report_generated"
    ALL_TIME_REPORT_GENERATED = "all_time_report_generated"

    # Shell input
    INVALID_INPUT = "invalid_input"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'report')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )

    # Correlation - ties together the events of one shell session
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transaction_added(tx_id, "income", amount, ...)
        event = AuditEventBuilder.session_started(correlation_id)
    """

    @staticmethod
    def session_started(correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            correlation_id=correlation_id,
            description="Finance tracker session started",
        )

    @staticmethod
    def session_ended(
        correlation_id: UUID,
        transaction_count: int,
        balance: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_ENDED,
            correlation_id=correlation_id,
            description=f"Session ended with {transaction_count} transactions",
            details={
                "transaction_count": transaction_count,
                "balance": str(balance),
            },
            is_user_action=True,
        )

    @staticmethod
    def transaction_added(
        transaction_id: UUID,
        kind: str,
        amount: Decimal,
        category: str,
        balance: Decimal,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            entity_type="transaction",
            entity_id=transaction_id,
            correlation_id=correlation_id,
            description=f"{kind.capitalize()} transaction added",
            details={
                "kind": kind,
                "amount": str(amount),
                "category": category,
                "balance": str(balance),
            },
            is_user_action=True,
        )

    @staticmethod
    def transaction_rejected(
        transaction_id: Optional[UUID],
        issue_type: str,
        reason: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="transaction",
            entity_id=transaction_id,
            correlation_id=correlation_id,
            description=f"Transaction rejected: {reason}",
            details={
                "issue_type": issue_type,
            },
            is_user_action=True,
        )

    @staticmethod
    def monthly_report_generated(
        month_key: str,
        transaction_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MONTHLY_REPORT_GENERATED,
            entity_type="report",
            correlation_id=correlation_id,
            description=f"Monthly report covered {transaction_count} transactions",
            details={
                "month_key": month_key,
                "transaction_count": transaction_count,
            },
        )

    @staticmethod
    def all_time_report_generated(
        transaction_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ALL_TIME_REPORT_GENERATED,
            entity_type="report",
            correlation_id=correlation_id,
            description=f"All-time report covered {transaction_count} transactions",
            details={
                "transaction_count": transaction_count,
            },
        )

    @staticmethod
    def invalid_input(
        prompt: str,
        value: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_INPUT,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Invalid input for {prompt}",
            details={
                "prompt": prompt,
                "value": value,
            },
            is_user_action=True,
        )
