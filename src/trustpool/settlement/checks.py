"""Conservation checks shared by both settlement algorithms.

Amounts are floats, so balances are compared within a fixed absolute
tolerance of one cent. This assumes currency-like amounts, not wei-scale
ledger units.
"""

from __future__ import annotations

import logging

from trustpool.errors import ConservationViolation, EmptyLedger
from trustpool.models.event import PoolKind

logger = logging.getLogger(__name__)

SETTLEMENT_TOLERANCE = 0.01


def is_close(a: float, b: float) -> bool:
    """|a - b| < SETTLEMENT_TOLERANCE."""
    return abs(a - b) < SETTLEMENT_TOLERANCE


def check_conservation(check: str, expected: float, actual: float) -> None:
    """Raise ConservationViolation if ``actual`` drifts from ``expected``."""
    if is_close(expected, actual):
        return
    logger.error(
        "[SETTLEMENT] Conservation check %s failed: expected=%.6f actual=%.6f",
        check, expected, actual,
    )
    raise ConservationViolation(check, expected, actual)


def require_settleable(ledger, kind: PoolKind) -> None:
    """Fail fast before any arithmetic on an unsuitable ledger.

    Raises:
        EmptyLedger: no stakes registered.
        TypeError: ledger belongs to the other pool kind.
    """
    if len(ledger) == 0:
        raise EmptyLedger("Cannot settle an empty ledger")
    if ledger.kind is not kind:
        raise TypeError(
            f"Cannot settle a {ledger.kind.value} pool with the {kind.value} algorithm"
        )
