"""Settlement entry point — picks the algorithm for the ledger's pool kind."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from trustpool.models.event import Level, OutcomeEvent, PoolKind
from trustpool.pool.ledger import RiskLedger
from trustpool.settlement.category import settle_category
from trustpool.settlement.directional import settle_directional

logger = logging.getLogger(__name__)

_SETTLERS = {
    PoolKind.CATEGORY: settle_category,
    PoolKind.DIRECTIONAL: settle_directional,
}


def settle(ledger: RiskLedger, level: Level) -> dict[int, OutcomeEvent]:
    """Settle ``ledger`` at closing ``level``. Never writes into the ledger.

    Raises:
        EmptyLedger: no stakes registered.
        NoWinningStake: zero winning capital at ``level``.
        ConservationViolation: internal balance check failed.
    """
    return _SETTLERS[ledger.kind](ledger, level)


@dataclass
class SettlementSummary:
    """Pool-level totals for one settlement."""

    level: Level
    total_pool: float
    fees: float
    pool_value: float
    winning_amount: float
    winners: int
    total_payout: float

    @property
    def balance(self) -> float:
        """total_pool - (payout + fees). ~0 for a valid settlement."""
        return self.total_pool - (self.total_payout + self.fees)


def summarize(
    ledger: RiskLedger, level: Level, winners: dict[int, OutcomeEvent],
) -> SettlementSummary:
    total_pool = ledger.total_pool()
    return SettlementSummary(
        level=level,
        total_pool=total_pool,
        fees=ledger.fees(),
        pool_value=total_pool * (1.0 - ledger.fee_rate),
        winning_amount=ledger.total_winning_amount(level),
        winners=len(winners),
        total_payout=sum(w.payout for w in winners.values()),
    )
