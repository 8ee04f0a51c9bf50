"""Settlement algorithms."""

from trustpool.settlement.category import settle_category
from trustpool.settlement.checks import SETTLEMENT_TOLERANCE, is_close
from trustpool.settlement.directional import settle_directional
from trustpool.settlement.engine import SettlementSummary, settle, summarize

__all__ = [
    "SETTLEMENT_TOLERANCE",
    "SettlementSummary",
    "is_close",
    "settle",
    "settle_category",
    "settle_directional",
    "summarize",
]
