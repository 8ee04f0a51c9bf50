"""Category pool settlement — flat pari-mutuel redistribution.

pool_value = total_pool × (1 - fee_rate)
win_value  = Σ amount of stakes on the closing category
payoff     = pool_value / win_value   (same for every winner)
payout     = amount × payoff
"""

from __future__ import annotations

import dataclasses
import logging

from trustpool.errors import NoWinningStake
from trustpool.models.event import OutcomeEvent, PoolKind
from trustpool.pool.ledger import RiskLedger
from trustpool.settlement.checks import check_conservation, require_settleable

logger = logging.getLogger(__name__)


def settle_category(ledger: RiskLedger, closing_category: str) -> dict[int, OutcomeEvent]:
    """Settle a category pool at ``closing_category``.

    Returns:
        {stake id: settled event} for winners only. Losers are absent.

    Raises:
        EmptyLedger: no stakes registered.
        TypeError: ledger is not a category pool.
        NoWinningStake: nothing was staked on ``closing_category``.
        ConservationViolation: payouts + fees do not balance the pool.
    """
    require_settleable(ledger, PoolKind.CATEGORY)

    total_pool = ledger.total_pool()
    pool_value = total_pool * (1.0 - ledger.fee_rate)
    win_value = ledger.total_winning_amount(closing_category)

    if win_value == 0:
        raise NoWinningStake(closing_category)

    payoff = pool_value / win_value

    winners: dict[int, OutcomeEvent] = {}
    for event in ledger.events():
        if not event.is_winner(closing_category):
            continue
        amount = event.stake.amount
        winners[event.id] = dataclasses.replace(
            event,
            stake=event.stake.with_payout(amount * payoff),
            pool_share=amount / pool_value,
            winnings_share=amount / win_value,
            payoff=payoff,
        )

    total_payout = sum(w.payout for w in winners.values())
    check_conservation("payout+fees=pool", total_pool, total_payout + ledger.fees())

    logger.info(
        "[SETTLEMENT] category=%s winners=%d payoff=%.4f payout=$%.2f fees=$%.2f",
        closing_category, len(winners), payoff, total_payout, ledger.fees(),
    )
    return winners
