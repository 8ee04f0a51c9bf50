"""Shared test fixtures for trustpool."""

from __future__ import annotations

import pytest

from trustpool.models.event import CategoryEvent, DirectionalEvent, PoolKind, Side
from trustpool.pool.ledger import RiskLedger


@pytest.fixture
def category_ledger() -> RiskLedger:
    """Default / no-default book: total 18000, 3000 on "default"."""
    ledger = RiskLedger(PoolKind.CATEGORY)
    ledger.register_stake(CategoryEvent("default"), 500, "barney")
    ledger.register_stake(CategoryEvent("default"), 2500, "barney")
    ledger.register_stake(CategoryEvent("no_default"), 10000, "arnold")
    ledger.register_stake(CategoryEvent("no_default"), 5000, "arnold")
    return ledger


@pytest.fixture
def directional_ledger() -> RiskLedger:
    """Long/Short book: total 5850, winners at 56 are Long@50, Long@55, Short@60."""
    ledger = RiskLedger(PoolKind.DIRECTIONAL)
    ledger.register_stake(DirectionalEvent(Side.LONG, 50), 500, "barney")
    ledger.register_stake(DirectionalEvent(Side.LONG, 55), 250, "barney")
    ledger.register_stake(DirectionalEvent(Side.LONG, 60), 1000, "barney")
    ledger.register_stake(DirectionalEvent(Side.SHORT, 60), 700, "arnold")
    ledger.register_stake(DirectionalEvent(Side.SHORT, 55), 900, "arnold")
    ledger.register_stake(DirectionalEvent(Side.SHORT, 50), 1000, "arnold")
    ledger.register_stake(DirectionalEvent(Side.SHORT, 40), 1500, "arnold")
    return ledger


@pytest.fixture
def empty_category_ledger() -> RiskLedger:
    return RiskLedger(PoolKind.CATEGORY)


@pytest.fixture
def empty_directional_ledger() -> RiskLedger:
    return RiskLedger(PoolKind.DIRECTIONAL)
