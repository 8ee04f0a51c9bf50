"""Tests for configuration (PoolConfig, POOL_KINDS)."""

from __future__ import annotations

import pytest

from trustpool.config import (
    DEFAULT_FEE_RATE,
    DEFAULT_MANAGER_ACCOUNT,
    DEFAULT_POOL_ACCOUNT,
    POOL_KINDS,
    PoolConfig,
)
from trustpool.models.event import PoolKind


class TestPoolKinds:
    def test_every_kind_described(self):
        assert set(POOL_KINDS) == {k.value for k in PoolKind}

    def test_required_keys(self):
        required = {"description", "level_type", "weighting", "fringe_levels"}
        for name, cfg in POOL_KINDS.items():
            for key in required:
                assert key in cfg, f"{name} missing key: {key}"

    def test_only_directional_has_fringe(self):
        assert POOL_KINDS["directional"]["fringe_levels"] is True
        assert POOL_KINDS["category"]["fringe_levels"] is False


class TestPoolConfig:
    def test_defaults(self):
        config = PoolConfig()
        assert config.fee_rate == DEFAULT_FEE_RATE == 0.03
        assert config.pool_account == DEFAULT_POOL_ACCOUNT
        assert config.manager_account == DEFAULT_MANAGER_ACCOUNT

    @pytest.mark.parametrize("fee_rate", [-0.01, 1.0, 2.0])
    def test_invalid_fee_rate(self, fee_rate):
        with pytest.raises(ValueError):
            PoolConfig(fee_rate=fee_rate)

    def test_zero_fee_allowed(self):
        assert PoolConfig(fee_rate=0.0).fee_rate == 0.0

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("TRUSTPOOL_FEE_RATE", raising=False)
        monkeypatch.delenv("TRUSTPOOL_POOL_ACCOUNT", raising=False)
        monkeypatch.delenv("TRUSTPOOL_MANAGER_ACCOUNT", raising=False)
        config = PoolConfig.from_env()
        assert config == PoolConfig()

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("TRUSTPOOL_FEE_RATE", "0.05")
        monkeypatch.setenv("TRUSTPOOL_POOL_ACCOUNT", "0xPOOL")
        monkeypatch.setenv("TRUSTPOOL_MANAGER_ACCOUNT", "0xMGR")
        config = PoolConfig.from_env()
        assert config.fee_rate == 0.05
        assert config.pool_account == "0xPOOL"
        assert config.manager_account == "0xMGR"

    def test_from_env_invalid_fee(self, monkeypatch):
        monkeypatch.setenv("TRUSTPOOL_FEE_RATE", "1.5")
        with pytest.raises(ValueError):
            PoolConfig.from_env()
