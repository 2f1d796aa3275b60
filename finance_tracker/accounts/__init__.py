"""Account package."""

from finance_tracker.accounts.account import Account

__all__ = ["Account"]
