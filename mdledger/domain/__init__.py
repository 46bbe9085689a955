"""Domain models and pure functions for mdledger.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Ledger parsing and aggregation separated from the CLI shell
"""

from mdledger.domain.models import CategoryName, DateLabel, LedgerConfig

__all__ = ["CategoryName", "DateLabel", "LedgerConfig"]
