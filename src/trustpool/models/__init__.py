"""Data models for trustpool."""

from trustpool.models.event import (
    CategoryEvent,
    DirectionalEvent,
    Level,
    OutcomeEvent,
    PoolKind,
    Side,
)
from trustpool.models.stake import StakeRecord

__all__ = [
    "StakeRecord",
    "OutcomeEvent",
    "CategoryEvent",
    "DirectionalEvent",
    "Level",
    "PoolKind",
    "Side",
]
