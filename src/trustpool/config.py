"""Pool configuration — pool kinds, fee defaults, env-based config."""

from __future__ import annotations

import os
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# 풀 유형 정의
# ---------------------------------------------------------------------------

POOL_KINDS: dict = {
    "category": {
        "description": "Mutually exclusive outcomes, exactly one category wins",
        "level_type": "str",
        "weighting": "flat",
        "fringe_levels": False,
    },
    "directional": {
        "description": "Long/Short at an integer strike, settled at a closing price",
        "level_type": "int",
        "weighting": "inverse_distance",
        "fringe_levels": True,
    },
}

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_FEE_RATE = 0.03  # 3% rake
DEFAULT_POOL_ACCOUNT = "Pool_Account_Address"
DEFAULT_MANAGER_ACCOUNT = "Pool_Manager_Address"


# ---------------------------------------------------------------------------
# PoolConfig — 환경변수 기반 설정
# ---------------------------------------------------------------------------


@dataclass
class PoolConfig:
    """풀 설정. 환경변수 또는 기본값.

    Account names are opaque labels; nothing here parses or validates them.
    """

    fee_rate: float = DEFAULT_FEE_RATE
    pool_account: str = DEFAULT_POOL_ACCOUNT
    manager_account: str = DEFAULT_MANAGER_ACCOUNT

    def __post_init__(self):
        if not 0.0 <= self.fee_rate < 1.0:
            raise ValueError(f"Invalid fee_rate: {self.fee_rate}. Must be in [0, 1).")

    @classmethod
    def from_env(cls) -> PoolConfig:
        """환경변수에서 설정 로드. 없으면 기본값."""
        fee_rate = float(os.environ.get("TRUSTPOOL_FEE_RATE", str(DEFAULT_FEE_RATE)))
        pool_account = os.environ.get("TRUSTPOOL_POOL_ACCOUNT", DEFAULT_POOL_ACCOUNT)
        manager_account = os.environ.get(
            "TRUSTPOOL_MANAGER_ACCOUNT", DEFAULT_MANAGER_ACCOUNT
        )

        return cls(
            fee_rate=fee_rate,
            pool_account=pool_account,
            manager_account=manager_account,
        )
