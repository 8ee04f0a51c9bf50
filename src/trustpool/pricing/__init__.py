"""Pre-trade pricing."""

from trustpool.pricing.pro_forma import (
    HYPOTHETICAL_OWNER,
    hypothetical_settlement,
    payoff_curve,
)

__all__ = ["HYPOTHETICAL_OWNER", "hypothetical_settlement", "payoff_curve"]
