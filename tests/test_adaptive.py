"""Tests for the adaptive factors and the game-log feedback loop."""

import logging

import pytest

from donkey.config.server import PLAYER_NAME
from donkey.exceptions import GameLogError
from donkey.poker.adaptive import (
    AdaptiveFactors,
    AdaptiveFactorsStore,
    FeedbackLoop,
    GameLog,
    analyze_game_logs,
    factors_from_rates,
)
from tests.fakes.fake_services import FakeLogSource, log_body, make_game_state

TOURNAMENT = "tournament_123"


def key(n: int):
    return (TOURNAMENT, f"game_{n}")


class TestFactors:
    def test_neutral_by_default(self):
        factors = AdaptiveFactors.neutral()
        assert factors.aggressiveness == 1.0
        assert factors.looseness == 1.0

    @pytest.mark.parametrize("value, clamped", [(0.1, 0.5), (0.5, 0.5), (1.7, 1.7), (2.0, 2.0), (9.0, 2.0)])
    def test_clamped_to_range(self, value, clamped):
        factors = AdaptiveFactors(aggressiveness=value, looseness=value)
        assert factors.aggressiveness == clamped
        assert factors.looseness == clamped

    @pytest.mark.parametrize(
        "win_rate, aggressiveness",
        [(0.9, 1.3), (0.61, 1.3), (0.6, 1.1), (0.5, 1.1), (0.4, 0.9), (0.3, 0.9), (0.2, 0.7), (0.0, 0.7)],
    )
    def test_aggressiveness_tiers(self, win_rate, aggressiveness):
        assert factors_from_rates(win_rate, 0.0).aggressiveness == aggressiveness

    @pytest.mark.parametrize(
        "fold_rate, looseness",
        [(1.0, 1.2), (0.71, 1.2), (0.7, 1.0), (0.6, 1.0), (0.5, 0.9), (0.4, 0.9), (0.3, 0.8), (0.0, 0.8)],
    )
    def test_looseness_tiers(self, fold_rate, looseness):
        assert factors_from_rates(0.0, fold_rate).looseness == looseness


class TestFactorsStore:
    def test_snapshot_is_stable_after_update(self):
        store = AdaptiveFactorsStore()
        before = store.snapshot()
        store.update(AdaptiveFactors(aggressiveness=1.3, looseness=0.8))
        assert before == AdaptiveFactors()
        assert store.snapshot() == AdaptiveFactors(aggressiveness=1.3, looseness=0.8)

    def test_change_is_logged(self, caplog):
        store = AdaptiveFactorsStore()
        with caplog.at_level(logging.INFO, logger="donkey.poker.adaptive.factors"):
            store.update(AdaptiveFactors(aggressiveness=1.1))
        assert "Adaptive factors updated" in caplog.text


class TestGameLog:
    def test_from_dict_keeps_rounds_and_result(self):
        log = GameLog.from_dict(key(1), log_body(["call", "raise"], winner=PLAYER_NAME))
        assert log.key == key(1)
        assert len(log.rounds) == 2
        assert log.result == {"winner": PLAYER_NAME}

    @pytest.mark.parametrize("body", [[], "nope", {"rounds": "nope"}])
    def test_from_dict_rejects_malformed_body(self, body):
        with pytest.raises(GameLogError):
            GameLog.from_dict(key(1), body)

    def test_missing_rounds_is_an_empty_log(self):
        log = GameLog.from_dict(key(1), {})
        assert log.rounds == []
        assert log.result is None


class TestAnalyzeGameLogs:
    def test_no_logs(self):
        assert analyze_game_logs([], PLAYER_NAME) is None

    def test_rates(self):
        logs = [
            GameLog.from_dict(key(1), log_body(["fold", "fold", "call", "raise"], winner=PLAYER_NAME)),
            GameLog.from_dict(key(2), log_body(["fold", "fold", "fold", "fold"], winner="Player 1")),
        ]
        analysis = analyze_game_logs(logs, PLAYER_NAME)
        assert analysis.games == 2
        assert analysis.actions == 8
        assert analysis.win_rate == 0.5
        assert analysis.fold_rate == 0.75
        assert analysis.aggressiveness == 0.125
        assert analysis.average_bet_size == 20.0

    def test_name_match_ignores_case_only(self):
        logs = [
            GameLog.from_dict(key(1), log_body(["fold"], winner=PLAYER_NAME.upper(), name=PLAYER_NAME.upper())),
            GameLog.from_dict(key(2), log_body(["fold"], winner="donkey", name="donkey")),
        ]
        analysis = analyze_game_logs(logs, PLAYER_NAME)
        assert analysis.actions == 1
        assert analysis.win_rate == 0.5

    def test_weak_raise_counts_as_bluff(self):
        body = {
            "rounds": [
                {
                    "players": [
                        {
                            "name": PLAYER_NAME,
                            "action": "raise",
                            "bet": 40,
                            "hole_cards": [{"rank": "2", "suit": "clubs"}, {"rank": "7", "suit": "hearts"}],
                        }
                    ]
                },
                {
                    "players": [
                        {
                            "name": PLAYER_NAME,
                            "action": "raise",
                            "bet": 40,
                            "hole_cards": [{"rank": "A", "suit": "clubs"}, {"rank": "K", "suit": "hearts"}],
                        }
                    ]
                },
            ]
        }
        analysis = analyze_game_logs([GameLog.from_dict(key(1), body)], PLAYER_NAME)
        assert analysis.bluff_frequency == 0.5
        assert analysis.aggressiveness == 1.0

    def test_garbage_entries_are_skipped(self):
        body = {"rounds": [{"players": "nope"}, {"players": [None, {"name": PLAYER_NAME, "bet": "x"}]}]}
        analysis = analyze_game_logs([GameLog.from_dict(key(1), body)], PLAYER_NAME)
        assert analysis.actions == 1
        assert analysis.average_bet_size == 0.0


class TestFeedbackLoop:
    def make_loop(self, source=None, **kwargs):
        return FeedbackLoop(source, AdaptiveFactorsStore(), PLAYER_NAME, **kwargs)

    def test_window_keeps_last_ten_games(self):
        loop = self.make_loop()
        for n in range(15):
            loop.remember(key(n))
        assert loop.window == [key(n) for n in range(5, 15)]

    def test_window_has_no_duplicates(self):
        loop = self.make_loop()
        loop.remember(key(1))
        loop.remember(key(2))
        loop.remember(key(1))
        assert loop.window == [key(2), key(1)]

    @pytest.mark.parametrize("round, due", [(0, True), (1, False), (4, False), (5, True), (10, True), (12, False)])
    def test_refresh_is_due_every_five_rounds(self, round, due):
        loop = self.make_loop(FakeLogSource())
        assert loop.observe(make_game_state(round=round)) is due
        loop.wait(1.0)

    def test_no_source_never_refreshes(self):
        loop = self.make_loop()
        assert loop.observe(make_game_state(round=5)) is False
        assert loop.refresh_now() is None
        assert loop.window == [(TOURNAMENT, "game_456")]

    def test_refresh_now_applies_new_factors(self):
        source = FakeLogSource(
            {
                key(1): log_body(["fold", "fold", "fold", "fold"], winner=PLAYER_NAME),
                key(2): log_body(["fold", "call"], winner=PLAYER_NAME),
            }
        )
        loop = self.make_loop(source)
        loop.remember(key(1))
        loop.remember(key(2))

        factors = loop.refresh_now()

        assert factors == AdaptiveFactors(aggressiveness=1.3, looseness=1.2)
        assert loop.store.snapshot() == factors
        assert source.requested == [key(1), key(2)]

    def test_failed_fetches_are_skipped(self, caplog):
        source = FakeLogSource({key(2): log_body(["call"])}, failing=[key(1)])
        loop = self.make_loop(source)
        loop.remember(key(1))
        loop.remember(key(2))

        with caplog.at_level(logging.WARNING, logger="donkey.poker.adaptive.feedback"):
            factors = loop.refresh_now()

        assert factors == AdaptiveFactors(aggressiveness=0.7, looseness=0.8)
        assert "Skipping game log" in caplog.text

    def test_nothing_fetched_keeps_factors(self):
        loop = self.make_loop(FakeLogSource())
        loop.store.update(AdaptiveFactors(aggressiveness=1.3))
        loop.remember(key(1))
        assert loop.refresh_now() is None
        assert loop.store.snapshot() == AdaptiveFactors(aggressiveness=1.3)

    def test_cached_logs_survive_a_failed_refetch(self):
        source = FakeLogSource({key(1): log_body(["raise"], winner=PLAYER_NAME)})
        loop = self.make_loop(source)
        loop.remember(key(1))
        loop.refresh_now()

        source.failing.add(key(1))
        assert loop.refresh_now() == AdaptiveFactors(aggressiveness=1.3, looseness=0.8)

    def test_background_refresh_updates_store(self):
        source = FakeLogSource({(TOURNAMENT, "game_456"): log_body(["call"], winner=PLAYER_NAME)})
        loop = self.make_loop(source)

        assert loop.observe(make_game_state(round=5)) is True
        loop.wait(2.0)

        assert loop.running is False
        assert loop.store.snapshot().aggressiveness == 1.3

    def test_background_failure_is_logged_not_raised(self, caplog):
        class BrokenSource:
            def fetch_log(self, key):
                raise RuntimeError("boom")

        loop = self.make_loop(BrokenSource())
        loop.remember(key(1))
        with caplog.at_level(logging.ERROR, logger="donkey.poker.adaptive.feedback"):
            assert loop.request_refresh() is True
            loop.wait(2.0)

        assert loop.running is False
        assert "Game log refresh failed" in caplog.text
        assert loop.store.snapshot() == AdaptiveFactors()
