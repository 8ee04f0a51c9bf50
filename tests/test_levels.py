"""Tests for level enumeration."""

from __future__ import annotations

from trustpool.config import POOL_KINDS
from trustpool.models.event import DirectionalEvent, Side
from trustpool.pool.levels import enumerate_levels, for_each_level


class TestEnumerateLevels:
    def test_category_levels_no_fringe(self, category_ledger):
        assert enumerate_levels(category_ledger) == {"default", "no_default"}

    def test_directional_levels_with_fringe(self, directional_ledger):
        assert enumerate_levels(directional_ledger) == {39, 40, 50, 55, 60, 61}

    def test_empty_ledger(self, empty_category_ledger, empty_directional_ledger):
        assert enumerate_levels(empty_category_ledger) == set()
        assert enumerate_levels(empty_directional_ledger) == set()

    def test_single_strike(self, empty_directional_ledger):
        empty_directional_ledger.register_stake(DirectionalEvent(Side.LONG, 50), 10, "x")
        assert enumerate_levels(empty_directional_ledger) == {49, 50, 51}

    def test_duplicates_removed(self, empty_directional_ledger):
        ledger = empty_directional_ledger
        ledger.register_stake(DirectionalEvent(Side.LONG, 50), 10, "x")
        ledger.register_stake(DirectionalEvent(Side.SHORT, 50), 10, "y")
        assert enumerate_levels(ledger) == {49, 50, 51}

    def test_fringe_follows_pool_kind_config(self, directional_ledger, monkeypatch):
        monkeypatch.setitem(POOL_KINDS["directional"], "fringe_levels", False)
        assert enumerate_levels(directional_ledger) == {40, 50, 55, 60}


class TestForEachLevel:
    def test_ascending_with_args(self, directional_ledger):
        seen = []
        for_each_level(directional_ledger, lambda level, tag: seen.append((tag, level)), "t")
        assert seen == [("t", 39), ("t", 40), ("t", 50), ("t", 55), ("t", 60), ("t", 61)]

    def test_empty_ledger_never_calls(self, empty_category_ledger):
        calls = []
        for_each_level(empty_category_ledger, calls.append)
        assert calls == []
