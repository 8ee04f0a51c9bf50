"""Pro-forma valuation — price a stake before it is committed.

Every operation here works on ``RiskLedger.clone()``; the caller's ledger
is never mutated, whatever the exit path.
"""

from __future__ import annotations

import logging

from trustpool.errors import NoWinningStake
from trustpool.models.event import Level, OutcomeEvent
from trustpool.pool.ledger import RiskLedger
from trustpool.pool.levels import enumerate_levels
from trustpool.settlement.engine import settle

logger = logging.getLogger(__name__)

HYPOTHETICAL_OWNER = "Hypothetical"


def _settle_one(ledger: RiskLedger, stake_id: int, level: Level) -> OutcomeEvent:
    """Settled event for ``stake_id``, or the unsettled one if it lost."""
    winners = settle(ledger, level)
    if stake_id in winners:
        return winners[stake_id]
    # Bust: payout and payoff stay at zero
    return ledger.get(stake_id)


def hypothetical_settlement(
    ledger: RiskLedger,
    template: OutcomeEvent,
    amount: float,
    level: Level,
) -> OutcomeEvent:
    """What would ``template`` staked with ``amount`` receive at ``level``?

    Args:
        ledger: 실제 풀 (변경되지 않음).
        template: Event shape of the hypothetical stake.
        amount: Hypothetical stake amount.
        level: Closing category or price.

    Returns:
        The settled event, or a zero-payout event if the stake loses.

    Raises:
        InvalidAmount: amount < 0 or not finite.
        NoWinningStake: nothing at all wins at ``level``.
    """
    pool = ledger.clone()
    stake_id = pool.register_stake(template, amount, HYPOTHETICAL_OWNER)
    return _settle_one(pool, stake_id, level)


def payoff_curve(
    ledger: RiskLedger,
    template: OutcomeEvent,
    amount: float,
) -> dict[Level, float]:
    """Payoff of a hypothetical stake at every enumerated level.

    The stake is registered once on a clone and revalued at each level of
    ``enumerate_levels(ledger)``. Levels where nothing wins record 0.0.

    Returns:
        {level: payoff}, ascending by level.
    """
    pool = ledger.clone()
    stake_id = pool.register_stake(template, amount, HYPOTHETICAL_OWNER)

    curve: dict[Level, float] = {}
    for level in sorted(enumerate_levels(ledger)):
        try:
            curve[level] = _settle_one(pool, stake_id, level).payoff
        except NoWinningStake:
            logger.debug("No winners at level %r — payoff 0", level)
            curve[level] = 0.0
    return curve
