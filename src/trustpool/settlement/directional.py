"""Directional pool settlement — inverse-distance redistribution.

Winners are Long stakes struck below the closing price and Short stakes
struck above it. The flat (prima facie) payout total is kept, but it is
redistributed in proportion to each winner's inverse distance to the pin
rather than to stake size.

Pass 1: flat values + inverse distance, accumulate the total.
Pass 2: normalise, reweight the winning amount, compute the payout.
Pass 2 needs the finished Pass 1 total.
"""

from __future__ import annotations

import dataclasses
import logging

from trustpool.errors import NoWinningStake
from trustpool.models.event import DirectionalEvent, PoolKind
from trustpool.pool.ledger import RiskLedger
from trustpool.settlement.checks import check_conservation, require_settleable

logger = logging.getLogger(__name__)


def settle_directional(
    ledger: RiskLedger, closing_price: int,
) -> dict[int, DirectionalEvent]:
    """Settle a directional pool at ``closing_price``.

    Returns:
        {stake id: settled event} for winners only.

    Raises:
        EmptyLedger: no stakes registered.
        TypeError: ledger is not a directional pool, or closing_price is not an int.
        NoWinningStake: no stake wins at ``closing_price``.
        ConservationViolation: payouts do not balance.
    """
    require_settleable(ledger, PoolKind.DIRECTIONAL)
    if isinstance(closing_price, bool) or not isinstance(closing_price, int):
        raise TypeError(f"closing_price must be an int: {closing_price!r}")

    total_pool = ledger.total_pool()
    pool_value = total_pool * (1.0 - ledger.fee_rate)
    win_value = ledger.total_winning_amount(closing_price)

    if win_value == 0:
        raise NoWinningStake(closing_price)

    prima_facie_payoff = pool_value / win_value

    # Pass 1
    first_pass: dict[int, DirectionalEvent] = {}
    for event in ledger.events():
        if not event.is_winner(closing_price):
            continue
        amount = event.stake.amount
        first_pass[event.id] = dataclasses.replace(
            event,
            pool_share=amount / pool_value,
            winnings_share=amount / win_value,
            prima_facie_payoff=prima_facie_payoff,
            prima_facie_payout=amount * prima_facie_payoff,
            inverse_distance_to_pin=event.winning_weight(closing_price),
        )

    total_inverse_distance = sum(w.inverse_distance_to_pin for w in first_pass.values())
    total_prima_facie_payout = sum(w.prima_facie_payout for w in first_pass.values())

    # Pass 2
    winners: dict[int, DirectionalEvent] = {}
    for stake_id, winner in first_pass.items():
        normalised = winner.inverse_distance_to_pin / total_inverse_distance
        adjusted_amount = normalised * win_value
        payout = adjusted_amount * prima_facie_payoff
        amount = winner.stake.amount
        winners[stake_id] = dataclasses.replace(
            winner,
            stake=winner.stake.with_payout(payout),
            normalised_inverse_distance=normalised,
            adjusted_amount=adjusted_amount,
            # payoff ratio is undefined for a zero stake
            payoff=payout / amount if amount > 0 else 0.0,
        )

    total_payout = sum(w.payout for w in winners.values())
    check_conservation(
        "prima_facie+fees=pool", total_pool, total_prima_facie_payout + ledger.fees()
    )
    check_conservation("prima_facie=payout", total_prima_facie_payout, total_payout)

    logger.info(
        "[SETTLEMENT] closing_price=%d winners=%d prima_facie_payoff=%.4f "
        "payout=$%.2f fees=$%.2f",
        closing_price, len(winners), prima_facie_payoff, total_payout, ledger.fees(),
    )
    for winner in winners.values():
        logger.debug(
            "  #%d %s amount=$%.2f distance=%d payout=$%.2f payoff=%.4f",
            winner.id, winner.label(), winner.amount,
            winner.distance_to(closing_price), winner.payout, winner.payoff,
        )
    return winners
