"""Console report renderer for pool state and settlements.

박스 그리기 문자 (═║╔╗╚╝) 로 정산 요약 출력.
"""

from __future__ import annotations

from trustpool.models.event import Level, OutcomeEvent
from trustpool.settlement.engine import SettlementSummary

WIDTH = 52


def format_category_totals(totals: dict[str, float]) -> str:
    """카테고리별 합계 한 줄씩."""
    if not totals:
        return "  (no stakes)"
    return "\n".join(
        f"  {name:<20} ${amount:>12,.2f}" for name, amount in sorted(totals.items())
    )


def format_winner_line(event: OutcomeEvent) -> str:
    """단일 승자를 한 줄 문자열로 포맷."""
    return (
        f"  #{event.id:<4} {event.label():<16} "
        f"| stake: ${event.amount:>10,.2f} "
        f"| payout: ${event.payout:>10,.2f} "
        f"| payoff: {event.payoff:7.4f} "
        f"| pool: {event.pool_share * 100:5.2f}% "
        f"| win: {event.winnings_share * 100:5.2f}%"
    )


def format_settlement(
    summary: SettlementSummary, winners: dict[int, OutcomeEvent],
) -> str:
    """정산 결과 박스 + 승자 목록.

    Args:
        summary: Totals from ``settlement.summarize``.
        winners: Settled winners keyed by stake id.

    Returns:
        렌더링된 문자열.
    """
    w = WIDTH
    level = str(summary.level)
    lines = [
        f"╔{'═' * w}╗",
        f"║  Closing level:   {level:<32} ║",
        f"╠{'═' * w}╣",
        f"║  Total pool:      ${summary.total_pool:<31,.2f} ║",
        f"║  Pool value:      ${summary.pool_value:<31,.2f} ║",
        f"║  Fees:            ${summary.fees:<31,.2f} ║",
        f"║  Winning amount:  ${summary.winning_amount:<31,.2f} ║",
        f"║  Winners:         {summary.winners:<32} ║",
        f"║  Total payout:    ${summary.total_payout:<31,.2f} ║",
        f"╚{'═' * w}╝",
    ]
    for stake_id in sorted(winners):
        lines.append(format_winner_line(winners[stake_id]))
    return "\n".join(lines)


def format_payoff_curve(curve: dict[Level, float], label: str = "") -> str:
    """Payoff per level, with a bar scaled to the best payoff."""
    if not curve:
        return "  (no levels)"
    best = max(curve.values())
    lines = [f"  Payoff curve {label}".rstrip()]
    for level, payoff in curve.items():
        bar = "█" * int(round(20 * payoff / best)) if best > 0 else ""
        lines.append(f"  {str(level):>12}  {payoff:8.4f}  {bar}")
    return "\n".join(lines)
