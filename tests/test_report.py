"""Tests for console report rendering."""

from __future__ import annotations

from trustpool.monitoring.report import (
    format_category_totals,
    format_payoff_curve,
    format_settlement,
    format_winner_line,
)
from trustpool.settlement.engine import settle, summarize


class TestCategoryTotals:
    def test_lines_sorted(self, category_ledger):
        text = format_category_totals(category_ledger.category_totals())
        lines = text.splitlines()
        assert len(lines) == 2
        assert "default" in lines[0]
        assert "3,000.00" in lines[0]
        assert "15,000.00" in lines[1]

    def test_empty(self):
        assert "no stakes" in format_category_totals({})


class TestSettlementReport:
    def test_box_and_winners(self, category_ledger):
        winners = settle(category_ledger, "default")
        text = format_settlement(summarize(category_ledger, "default", winners), winners)
        assert text.startswith("╔")
        assert "Closing level:   default" in text
        assert "Total pool:      $18,000.00" in text
        assert "Pool value:      $17,460.00" in text
        assert "540.00" in text
        assert "2,910.00" in text
        assert "14,550.00" in text

    def test_winner_line(self, directional_ledger):
        winners = settle(directional_ledger, 56)
        line = format_winner_line(winners[1])
        assert "#1" in line
        assert "Long @ 55" in line
        assert "250.00" in line


class TestPayoffCurveReport:
    def test_curve_rows(self):
        text = format_payoff_curve({39: 0.0, 55: 2.0, 61: 4.0}, "Long @ 50")
        lines = text.splitlines()
        assert lines[0] == "  Payoff curve Long @ 50"
        assert len(lines) == 4
        assert lines[3].endswith("█" * 20)
        assert "█" not in lines[1]

    def test_all_zero_curve(self):
        text = format_payoff_curve({1: 0.0, 2: 0.0})
        assert "█" not in text

    def test_empty_curve(self):
        assert "no levels" in format_payoff_curve({})
