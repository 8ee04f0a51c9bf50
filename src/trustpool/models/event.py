"""Outcome events — what a stake is riding on, and whether a closing level pays it.

Two variants share one capability set:

- CategoryEvent: mutually exclusive outcome, wins on exact category match.
- DirectionalEvent: Long/Short at an integer strike, wins on a strict
  price inequality against the closing price (the "pin").

Events are frozen. Result fields (pool_share, winnings_share, payoff, and
the directional intermediates) are only meaningful on the copies returned
by settlement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from trustpool.models.stake import StakeRecord

Level = Union[str, int]


class PoolKind(Enum):
    """풀 유형."""

    CATEGORY = "category"        # exactly one category wins
    DIRECTIONAL = "directional"  # Long/Short against a closing price


class Side(Enum):
    """Directional side. There is no third state."""

    LONG = "Long"
    SHORT = "Short"


@dataclass(frozen=True, kw_only=True)
class OutcomeEvent(ABC):
    """Common shape of a staked event plus its settlement results."""

    kind: ClassVar[PoolKind]

    stake: StakeRecord = field(default_factory=StakeRecord)
    pool_share: float = 0.0       # amount / fee-adjusted pool value
    winnings_share: float = 0.0   # amount / winning-side amount
    payoff: float = 0.0           # payout / amount

    @abstractmethod
    def classify(self) -> str:
        """Category name used by ``RiskLedger.category_totals``."""

    @abstractmethod
    def is_winner(self, level: Level) -> bool:
        """Does this event pay out if the pool closes at ``level``?"""

    @abstractmethod
    def winning_weight(self, level: Level) -> float:
        """Redistribution weight at ``level`` (0 for a losing event)."""

    @abstractmethod
    def level_key(self) -> Level:
        """The level this event was staked on."""

    @abstractmethod
    def with_stake(self, stake: StakeRecord) -> OutcomeEvent:
        """Fresh, unsettled event of the same shape around ``stake``."""

    @abstractmethod
    def label(self) -> str:
        """Short human-readable description."""

    def winning_amount(self, level: Level) -> float:
        """Staked amount if this event wins at ``level``, else 0."""
        if self.is_winner(level):
            return self.stake.amount
        return 0.0

    @property
    def id(self) -> int:
        return self.stake.id

    @property
    def amount(self) -> float:
        return self.stake.amount

    @property
    def payout(self) -> float:
        return self.stake.payout


@dataclass(frozen=True)
class CategoryEvent(OutcomeEvent):
    """Mutually exclusive outcome, e.g. "default" / "no_default"."""

    kind: ClassVar[PoolKind] = PoolKind.CATEGORY

    category: str

    def classify(self) -> str:
        return self.category

    def is_winner(self, level: Level) -> bool:
        return self.category == level

    def winning_weight(self, level: Level) -> float:
        # Flat: every winner counts the same
        return 1.0 if self.is_winner(level) else 0.0

    def level_key(self) -> str:
        return self.category

    def with_stake(self, stake: StakeRecord) -> CategoryEvent:
        return CategoryEvent(self.category, stake=stake)

    def label(self) -> str:
        return self.category


@dataclass(frozen=True)
class DirectionalEvent(OutcomeEvent):
    """Long or Short at an integer strike price."""

    kind: ClassVar[PoolKind] = PoolKind.DIRECTIONAL

    side: Side
    strike_price: int

    prima_facie_payoff: float = 0.0          # flat odds before reweighting
    prima_facie_payout: float = 0.0          # amount * prima_facie_payoff
    inverse_distance_to_pin: float = 0.0
    normalised_inverse_distance: float = 0.0
    adjusted_amount: float = 0.0             # share of the winning pool after reweighting

    def __post_init__(self):
        if isinstance(self.side, str):
            try:
                object.__setattr__(self, "side", Side(self.side.capitalize()))
            except ValueError:
                raise ValueError(
                    f"Invalid side: {self.side!r}. Must be 'Long' or 'Short'."
                ) from None
        if not isinstance(self.side, Side):
            raise ValueError(f"Invalid side: {self.side!r}. Must be 'Long' or 'Short'.")
        if isinstance(self.strike_price, bool) or not isinstance(self.strike_price, int):
            raise TypeError(f"strike_price must be an int: {self.strike_price!r}")

    def classify(self) -> str:
        return self.side.value

    def is_winner(self, level: Level) -> bool:
        if self.side is Side.LONG:
            return level > self.strike_price
        return level < self.strike_price

    def distance_to(self, level: int) -> int:
        return abs(level - self.strike_price)

    def winning_weight(self, level: Level) -> float:
        # Strict inequality in is_winner keeps the distance > 0
        if not self.is_winner(level):
            return 0.0
        return 1.0 / self.distance_to(level)

    def level_key(self) -> int:
        return self.strike_price

    def with_stake(self, stake: StakeRecord) -> DirectionalEvent:
        return DirectionalEvent(self.side, self.strike_price, stake=stake)

    def label(self) -> str:
        return f"{self.side.value} @ {self.strike_price}"
