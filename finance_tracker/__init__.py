"""
Personal Finance Tracker - Core Package

An interactive personal ledger for a single user: record income and
expenses, then review monthly or all-time summaries by category.

DESIGN PRINCIPLES:
1. Validate on admission, never on construction
2. A refused entry never touches the ledger
3. No silent corrections
4. Reports are pure reads of current state
5. Every ledger change is auditable
"""

__version__ = "1.0.0"
