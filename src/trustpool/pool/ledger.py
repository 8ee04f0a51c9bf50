"""RiskLedger — append-only book of stakes for one pool instance."""

from __future__ import annotations

import copy
import logging
import math
from collections import defaultdict
from typing import Iterator, Optional

from trustpool.config import (
    DEFAULT_FEE_RATE,
    DEFAULT_MANAGER_ACCOUNT,
    DEFAULT_POOL_ACCOUNT,
    PoolConfig,
)
from trustpool.errors import InvalidAmount
from trustpool.models.event import Level, OutcomeEvent, PoolKind
from trustpool.models.stake import StakeRecord
from trustpool.pool.levels import enumerate_levels

logger = logging.getLogger(__name__)


class RiskLedger:
    """Registered stakes keyed by sequential id, plus fee configuration.

    Stakes are never removed or rewritten after registration. Settlement
    works on copies; pricing a hypothetical stake works on ``clone()``.

    Args:
        kind: Which pool shape this ledger accepts.
        fee_rate: Fraction of the pool retained as fees, in [0, 1).
        pool_account: Label stamped on every stake record.
        manager_account: Pool manager label.
    """

    def __init__(
        self,
        kind: PoolKind,
        fee_rate: float = DEFAULT_FEE_RATE,
        pool_account: str = DEFAULT_POOL_ACCOUNT,
        manager_account: str = DEFAULT_MANAGER_ACCOUNT,
    ):
        if not 0.0 <= fee_rate < 1.0:
            raise ValueError(f"Invalid fee_rate: {fee_rate}. Must be in [0, 1).")
        self.kind = kind
        self.fee_rate = fee_rate
        self._pool_account = pool_account
        self._manager_account = manager_account
        self._next_id: int = 0
        self._stakes: dict[int, OutcomeEvent] = {}

    @classmethod
    def from_config(cls, kind: PoolKind, config: PoolConfig) -> RiskLedger:
        return cls(
            kind,
            fee_rate=config.fee_rate,
            pool_account=config.pool_account,
            manager_account=config.manager_account,
        )

    # ------------------------------------------------------------------
    # Ingest
    # ------------------------------------------------------------------

    def register_stake(self, template: OutcomeEvent, amount: float, owner: str) -> int:
        """스테이크 등록. Returns the new stake id.

        Raises:
            InvalidAmount: amount < 0, NaN or infinite.
            TypeError: template belongs to the other pool kind.
        """
        if template.kind is not self.kind:
            raise TypeError(
                f"Cannot register {template.kind.value} event in a {self.kind.value} pool"
            )
        amount = float(amount)
        if not math.isfinite(amount) or amount < 0:
            raise InvalidAmount(amount)

        stake = StakeRecord(
            id=self._next_id,
            amount=amount,
            owner_account=owner,
            pool_account=self._pool_account,
        )
        self._stakes[stake.id] = template.with_stake(stake)
        self._next_id += 1

        logger.debug(
            "Registered stake %d: %s $%.2f from %s",
            stake.id, template.label(), amount, owner,
        )
        return stake.id

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def pool_account(self) -> str:
        return self._pool_account

    @property
    def manager_account(self) -> str:
        return self._manager_account

    def get(self, stake_id: int) -> Optional[OutcomeEvent]:
        """Stake by id. None if not registered."""
        return self._stakes.get(stake_id)

    def stake_ids(self) -> list[int]:
        return sorted(self._stakes)

    def events(self) -> Iterator[OutcomeEvent]:
        for stake_id in sorted(self._stakes):
            yield self._stakes[stake_id]

    def __len__(self) -> int:
        return len(self._stakes)

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def total_pool(self) -> float:
        """전체 스테이크 합."""
        return sum(event.stake.amount for event in self._stakes.values())

    def total_winning_amount(self, level: Level) -> float:
        """What has been staked on outcomes that win at ``level``?"""
        return sum(event.winning_amount(level) for event in self._stakes.values())

    def count_winners(self, level: Level) -> int:
        return sum(1 for event in self._stakes.values() if event.is_winner(level))

    def pool_winning_amount(self) -> float:
        """Sum of the winning amount at every enumerated level."""
        return sum(self.total_winning_amount(level) for level in enumerate_levels(self))

    def category_totals(self) -> dict[str, float]:
        """카테고리별 스테이크 합 (category name, or Long/Short)."""
        totals: dict[str, float] = defaultdict(float)
        for event in self._stakes.values():
            totals[event.classify()] += event.stake.amount
        return dict(totals)

    def fees(self) -> float:
        return self.total_pool() * self.fee_rate

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def clone(self) -> RiskLedger:
        """Deep copy. The clone's id counter continues independently."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return (
            f"RiskLedger(kind={self.kind.value}, stakes={len(self._stakes)}, "
            f"fee_rate={self.fee_rate}, total_pool={self.total_pool():.2f})"
        )
