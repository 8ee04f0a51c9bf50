"""trustpool — pari-mutuel settlement engine for category and directional pools."""

from trustpool.config import PoolConfig
from trustpool.errors import (
    ConservationViolation,
    EmptyLedger,
    InvalidAmount,
    NoWinningStake,
    TrustPoolError,
)
from trustpool.models import CategoryEvent, DirectionalEvent, OutcomeEvent, PoolKind, Side, StakeRecord
from trustpool.pool import RiskLedger, enumerate_levels
from trustpool.pricing import hypothetical_settlement, payoff_curve
from trustpool.settlement import settle

__all__ = [
    "PoolConfig",
    "TrustPoolError",
    "InvalidAmount",
    "NoWinningStake",
    "ConservationViolation",
    "EmptyLedger",
    "StakeRecord",
    "OutcomeEvent",
    "CategoryEvent",
    "DirectionalEvent",
    "PoolKind",
    "Side",
    "RiskLedger",
    "enumerate_levels",
    "settle",
    "hypothetical_settlement",
    "payoff_curve",
]
