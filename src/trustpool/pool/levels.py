"""Level enumeration — every closing level worth evaluating for a ledger."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from trustpool.config import POOL_KINDS
from trustpool.models.event import Level

if TYPE_CHECKING:
    from trustpool.pool.ledger import RiskLedger


def enumerate_levels(ledger: RiskLedger) -> set[Level]:
    """Distinct staked levels, plus one tick under/over where the pool
    kind has fringe levels (see ``POOL_KINDS``).

    The fringe levels make payoff curves show the flat region outside the
    staked range. An empty ledger yields an empty set.
    """
    levels: set[Level] = {event.level_key() for event in ledger.events()}
    if not levels:
        return levels

    if POOL_KINDS[ledger.kind.value]["fringe_levels"]:
        levels.add(min(levels) - 1)  # one tick under
        levels.add(max(levels) + 1)  # one tick over

    return levels


def for_each_level(ledger: RiskLedger, fn: Callable, *args) -> None:
    """Call ``fn(level, *args)`` for each enumerated level, ascending."""
    for level in sorted(enumerate_levels(ledger)):
        fn(level, *args)
