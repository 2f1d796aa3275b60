"""
Audit Logger

DESIGN DECISION: Every change to the ledger and every report is logged.
This provides:
1. Traceability of the balance
2. Debugging capability when entries are refused
3. A session history the user can inspect

The audit logger:
- Writes structured logs through structlog
- Keeps an in-memory, append-only trail for the current process
- Supports correlation IDs to tie together one shell session
"""

import logging
import sys
from decimal import Decimal
from typing import Any, Callable, Optional
from uuid import UUID, uuid4

import structlog

from finance_tracker.config import AppSettings
from finance_tracker.models.audit import AuditEvent, AuditEventBuilder


_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


# Configure structlog for local logging
structlog.configure(
    processors=_SHARED_PROCESSORS + [structlog.processors.JSONRenderer()],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(settings: AppSettings) -> None:
    """
    Route structured logs to stderr at the configured level.

    Call once at startup, before any logger is used.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=settings.log_level_number,
    )
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=_SHARED_PROCESSORS + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. The in-memory trail exposed as ``events``
    """

    def __init__(
        self,
        enabled: bool = True,
        correlation_id: Optional[UUID] = None,
    ):
        """
        Initialize audit logger.

        Args:
            enabled: When False, events are neither logged nor kept.
            correlation_id: Default correlation ID stamped on events
                    that don't carry their own.
        """
        self._enabled = enabled
        self._correlation_id = correlation_id
        self._events: list[AuditEvent] = []
        self._logger = structlog.get_logger()

    @property
    def events(self) -> tuple[AuditEvent, ...]:
        """Read-only view of the trail, oldest first."""
        return tuple(self._events)

    @property
    def correlation_id(self) -> Optional[UUID]:
        return self._correlation_id

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns False if auditing is disabled.
        """
        if not self._enabled:
            return False

        if event.correlation_id is None and self._correlation_id is not None:
            event = event.model_copy(update={"correlation_id": self._correlation_id})

        log_dict = event.to_log_dict()

        if event.severity.value == "error":
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        self._events.append(event)
        return True

    def _record(self, build: Callable[..., AuditEvent], **kwargs: Any) -> bool:
        """
        Build an event and log it.

        Auditing never breaks the caller: failures are logged and
        reported as False.
        """
        try:
            return self.log(build(**kwargs))
        except Exception as e:
            self._logger.error(
                "audit_event_failed",
                builder=getattr(build, "__name__", str(build)),
                error=str(e),
            )
            return False

    def log_session_started(self) -> bool:
        """Log the start of a shell session."""
        return self._record(
            AuditEventBuilder.session_started,
            correlation_id=self._correlation_id or create_correlation_id(),
        )

    def log_session_ended(
        self,
        transaction_count: int,
        balance: Decimal,
    ) -> bool:
        """Log the end of a shell session."""
        return self._record(
            AuditEventBuilder.session_ended,
            correlation_id=self._correlation_id or create_correlation_id(),
            transaction_count=transaction_count,
            balance=balance,
        )

    def log_transaction_added(
        self,
        transaction_id: UUID,
        kind: str,
        amount: Decimal,
        category: str,
        balance: Decimal,
    ) -> bool:
        """Log an admitted transaction."""
        return self._record(
            AuditEventBuilder.transaction_added,
            transaction_id=transaction_id,
            kind=kind,
            amount=amount,
            category=category,
            balance=balance,
        )

    def log_transaction_rejected(
        self,
        transaction_id: Optional[UUID],
        issue_type: str,
        reason: str,
    ) -> bool:
        """Log a refused transaction."""
        return self._record(
            AuditEventBuilder.transaction_rejected,
            transaction_id=transaction_id,
            issue_type=issue_type,
            reason=reason,
        )

    def log_monthly_report(
        self,
        month_key: str,
        transaction_count: int,
    ) -> bool:
        """Log monthly report generation."""
        return self._record(
            AuditEventBuilder.monthly_report_generated,
            month_key=month_key,
            transaction_count=transaction_count,
        )

    def log_all_time_report(self, transaction_count: int) -> bool:
        """Log all-time report generation."""
        return self._record(
            AuditEventBuilder.all_time_report_generated,
            transaction_count=transaction_count,
        )

    def log_invalid_input(self, prompt: str, value: str) -> bool:
        """Log input the shell could not use."""
        return self._record(
            AuditEventBuilder.invalid_input,
            prompt=prompt,
            value=value,
        )


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a shell session and hand it to the AuditLogger.
    """
    return uuid4()
