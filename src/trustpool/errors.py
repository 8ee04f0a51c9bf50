"""Error taxonomy for ledger registration and settlement."""

from __future__ import annotations


class TrustPoolError(Exception):
    """Base exception for trustpool engine errors."""


class InvalidAmount(TrustPoolError, ValueError):
    """Stake amount is negative or not finite."""

    def __init__(self, amount: float):
        super().__init__(f"Invalid stake amount: {amount!r}. Must be finite and >= 0.")
        self.amount = amount


class NoWinningStake(TrustPoolError):
    """Zero winning capital at the requested level — payoff would be undefined."""

    def __init__(self, level):
        super().__init__(f"No winning stake at level {level!r}")
        self.level = level


class ConservationViolation(TrustPoolError):
    """A settlement failed its monetary conservation check.

    Indicates an algorithmic bug, not bad input.
    """

    def __init__(self, check: str, expected: float, actual: float):
        super().__init__(
            f"Conservation check '{check}' failed: expected {expected:.6f}, got {actual:.6f}"
        )
        self.check = check
        self.expected = expected
        self.actual = actual


class EmptyLedger(TrustPoolError):
    """Settlement requested on a ledger with no stakes."""

    pass
