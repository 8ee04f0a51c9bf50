"""Demo driver — build a book, settle it, quote a hypothetical stake.

Usage:
    python -m trustpool
    python -m trustpool --pool directional --close 56 --quote --side Long --strike 50
    python -m trustpool --stakes book.json --close default --fee-rate 0.05
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from trustpool.config import POOL_KINDS, PoolConfig
from trustpool.errors import TrustPoolError
from trustpool.models.event import CategoryEvent, DirectionalEvent, OutcomeEvent, PoolKind
from trustpool.monitoring.report import (
    format_category_totals,
    format_payoff_curve,
    format_settlement,
)
from trustpool.pool.ledger import RiskLedger
from trustpool.pricing.pro_forma import payoff_curve
from trustpool.settlement.engine import settle, summarize

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Demo books
# ---------------------------------------------------------------------------

DEMO_CATEGORY_BOOK: list[dict] = [
    {"category": "default", "amount": 500, "owner": "barney"},
    {"category": "default", "amount": 2500, "owner": "barney"},
    {"category": "no_default", "amount": 10000, "owner": "arnold"},
    {"category": "no_default", "amount": 5000, "owner": "arnold"},
]

DEMO_DIRECTIONAL_BOOK: list[dict] = [
    {"side": "Long", "strike": 50, "amount": 500, "owner": "barney"},
    {"side": "Long", "strike": 55, "amount": 250, "owner": "barney"},
    {"side": "Long", "strike": 60, "amount": 1000, "owner": "barney"},
    {"side": "Short", "strike": 60, "amount": 700, "owner": "arnold"},
    {"side": "Short", "strike": 55, "amount": 900, "owner": "arnold"},
    {"side": "Short", "strike": 50, "amount": 1000, "owner": "arnold"},
    {"side": "Short", "strike": 40, "amount": 1500, "owner": "arnold"},
]

DEFAULT_CLOSE = {
    PoolKind.CATEGORY: "default",
    PoolKind.DIRECTIONAL: "56",
}

# ---------------------------------------------------------------------------
# Core functions
# ---------------------------------------------------------------------------


def event_from_dict(data: dict, kind: PoolKind) -> OutcomeEvent:
    """JSON 스테이크 항목 → 이벤트 템플릿."""
    if kind is PoolKind.CATEGORY:
        if "category" not in data:
            raise ValueError(f"Category stake missing 'category': {data!r}")
        return CategoryEvent(str(data["category"]))
    if "side" not in data or "strike" not in data:
        raise ValueError(f"Directional stake missing 'side'/'strike': {data!r}")
    strike = data["strike"]
    if isinstance(strike, float) and not strike.is_integer():
        raise ValueError(f"Strike must be a whole number: {strike!r}")
    strike = int(strike)  # "60" and 60.0 are fine, "60.5" raises
    return DirectionalEvent(data["side"], strike)


def load_book(path: str) -> list[dict]:
    """Load a JSON list of stakes."""
    with open(Path(path)) as f:
        book = json.load(f)
    if not isinstance(book, list):
        raise ValueError(f"Stake file must contain a JSON list: {path}")
    return book


def build_ledger(kind: PoolKind, book: list[dict], config: PoolConfig) -> RiskLedger:
    """Register every stake in ``book`` on a fresh ledger."""
    ledger = RiskLedger.from_config(kind, config)
    for entry in book:
        if "amount" not in entry:
            raise ValueError(f"Stake missing 'amount': {entry!r}")
        ledger.register_stake(
            event_from_dict(entry, kind),
            entry["amount"],
            str(entry.get("owner", "")),
        )
    logger.info(
        "Loaded %d stakes into %s pool: total=$%.2f",
        len(ledger), kind.value, ledger.total_pool(),
    )
    return ledger


def parse_level(raw: str, kind: PoolKind):
    """CLI 문자열 → 레벨 (POOL_KINDS level_type 기준)."""
    if POOL_KINDS[kind.value]["level_type"] == "int":
        return int(raw)
    return raw


def quote_template(args: argparse.Namespace, kind: PoolKind) -> OutcomeEvent:
    """--quote 옵션의 가상 스테이크 템플릿."""
    if kind is PoolKind.CATEGORY:
        return CategoryEvent(args.category)
    return DirectionalEvent(args.side, args.strike)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """커맨드라인 인자 파싱."""
    parser = argparse.ArgumentParser(
        prog="trustpool",
        description="Pari-mutuel pool settlement demo",
    )
    parser.add_argument(
        "--pool", type=str, default="category",
        choices=[k.value for k in PoolKind],
        help="Pool kind (default: category)",
    )
    parser.add_argument(
        "--stakes", type=str, default=None,
        help="JSON file with a list of stakes (default: built-in demo book)",
    )
    parser.add_argument(
        "--close", type=str, default=None,
        help="Closing category or price (default: 'default' / 56)",
    )
    parser.add_argument(
        "--fee-rate", type=float, default=None,
        help="Override fee rate (default: TRUSTPOOL_FEE_RATE or 0.03)",
    )
    parser.add_argument(
        "--quote", action="store_true", default=False,
        help="Print the payoff curve of a hypothetical stake",
    )
    parser.add_argument(
        "--category", type=str, default="default",
        help="Hypothetical stake category (category pool)",
    )
    parser.add_argument(
        "--side", type=str, default="Long", choices=["Long", "Short"],
        help="Hypothetical stake side (directional pool)",
    )
    parser.add_argument(
        "--strike", type=int, default=50,
        help="Hypothetical stake strike (directional pool)",
    )
    parser.add_argument(
        "--amount", type=float, default=500.0,
        help="Hypothetical stake amount (default: 500)",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Build → settle → (quote). Returns the process exit code."""
    kind = PoolKind(args.pool)

    try:
        config = PoolConfig.from_env()
        if args.fee_rate is not None:
            config = PoolConfig(
                fee_rate=args.fee_rate,
                pool_account=config.pool_account,
                manager_account=config.manager_account,
            )

        if args.stakes:
            book = load_book(args.stakes)
        elif kind is PoolKind.CATEGORY:
            book = DEMO_CATEGORY_BOOK
        else:
            book = DEMO_DIRECTIONAL_BOOK

        ledger = build_ledger(kind, book, config)
        level = parse_level(args.close or DEFAULT_CLOSE[kind], kind)

        print(f"\n[{kind.value.upper()}] {len(ledger)} stakes, fee rate {ledger.fee_rate:.2%}")
        print(format_category_totals(ledger.category_totals()))

        winners = settle(ledger, level)
        print(format_settlement(summarize(ledger, level, winners), winners))

        if args.quote:
            template = quote_template(args, kind)
            curve = payoff_curve(ledger, template, args.amount)
            print(format_payoff_curve(curve, f"— {template.label()} ${args.amount:,.2f}"))
    except OSError as exc:
        logger.error("Cannot read stake file: %s", exc)
        return 1
    except (TrustPoolError, ValueError, TypeError) as exc:
        logger.error("Settlement failed: %s", exc)
        return 1

    print()
    return 0


def cli_main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return run(parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(cli_main())
