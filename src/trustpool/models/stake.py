"""StakeRecord — one participant's capital at risk."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StakeRecord:
    """A single registered stake.

    Frozen: settlement produces a new record with ``payout`` filled in
    (see ``with_payout``) instead of writing into the ledger's copy.
    """

    id: int = 0
    amount: float = 0.0
    owner_account: str = ""
    pool_account: str = ""
    payout: float = 0.0  # absolute currency amount, 0 until settled

    def with_payout(self, payout: float) -> StakeRecord:
        return StakeRecord(
            id=self.id,
            amount=self.amount,
            owner_account=self.owner_account,
            pool_account=self.pool_account,
            payout=payout,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "amount": self.amount,
            "owner_account": self.owner_account,
            "pool_account": self.pool_account,
            "payout": self.payout,
        }
