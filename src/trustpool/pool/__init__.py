"""Ledger and level enumeration."""

from trustpool.pool.ledger import RiskLedger
from trustpool.pool.levels import enumerate_levels, for_each_level

__all__ = ["RiskLedger", "enumerate_levels", "for_each_level"]
