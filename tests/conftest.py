"""Shared fixtures."""

from decimal import Decimal

import pytest

from finance_tracker.accounts import Account
from finance_tracker.audit import AuditLogger
from finance_tracker.config import AppSettings
from finance_tracker.models.transaction import Expense, Income
from finance_tracker.reports import ReportGenerator


class ScriptedIO:
    """Feeds canned answers to the shell and records everything it prints."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def output(self, text):
        self.lines.append(text)

    @property
    def text(self):
        return "\n".join(self.lines)


@pytest.fixture
def settings():
    return AppSettings(_env_file=None)


@pytest.fixture
def audit_logger():
    return AuditLogger()


@pytest.fixture
def account(audit_logger):
    return Account(audit_logger=audit_logger)


@pytest.fixture
def report_generator():
    return ReportGenerator()


@pytest.fixture
def scenario_account():
    """Salary in January, food in January and February."""
    acc = Account()
    acc.add_transaction(Income(amount=Decimal("1000"), category="Salary", date="01-01-2024"))
    acc.add_transaction(Expense(amount=Decimal("200"), category="Food", date="15-01-2024"))
    acc.add_transaction(Expense(amount=Decimal("50"), category="Food", date="20-02-2024"))
    return acc


@pytest.fixture
def scripted_io():
    return ScriptedIO
