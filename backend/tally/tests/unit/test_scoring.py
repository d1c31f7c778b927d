"""Tests for totals, ranking, winners and comparative highlighting."""

import itertools

import pytest

from tally.logic.engine import finish_game, set_score
from tally.logic.enums import CellRank, GameStatus
from tally.logic.scoring import (
    RankingSummary,
    classify_cell,
    classify_round,
    classify_total,
    compute_totals,
    ranking_summary,
    winner_ids,
)
from tally.logic.state_utils import append_round, empty_round
from tally.tests.helpers import create_game, create_players


class TestComputeTotals:
    def test_sums_rounds_per_player(self):
        game = create_game([[1, 2, 3, 4], [10, 20, 30, 40]])
        assert compute_totals(game) == {1: 11, 2: 22, 3: 33, 4: 44}

    def test_absent_counts_as_zero(self):
        game = create_game([[5, None, 0, -3], [None, None, None, None]])
        assert compute_totals(game) == {1: 5, 2: 0, 3: 0, 4: -3}

    def test_all_absent_round_contributes_nothing(self):
        game = create_game([[3, 4, 5, 6]])
        with_empty = append_round(game, empty_round(game.player_ids))

        assert compute_totals(with_empty) == compute_totals(game)

    def test_independent_of_round_order(self):
        rows = [[1, None, 3, 4], [7, 2, None, 0], [-5, 6, 6, 9]]
        expected = compute_totals(create_game(rows))

        for permutation in itertools.permutations(rows):
            assert compute_totals(create_game(list(permutation))) == expected

    def test_every_player_present_even_without_scores(self):
        game = create_game()
        assert compute_totals(game) == {1: 0, 2: 0, 3: 0, 4: 0}


class TestRankingSummary:
    def test_global_tie(self):
        assert ranking_summary({1: 10, 2: 10, 3: 10, 4: 10}) == RankingSummary(10, 10, is_tie=True)

    def test_pairs_sharing_extremes_are_not_a_tie(self):
        summary = ranking_summary({1: 5, 2: 5, 3: 9, 4: 9})
        assert summary == RankingSummary(min_total=5, max_total=9, is_tie=False)

    def test_shared_lowest_is_not_a_tie(self):
        assert ranking_summary({1: 3, 2: 3, 3: 8, 4: 12}).is_tie is False

    def test_no_totals(self):
        assert ranking_summary({}) == RankingSummary(0, 0, is_tie=True)


class TestWinners:
    def test_no_winner_while_playing(self):
        game = create_game([[1, 2, 3, 4]])
        assert winner_ids(game, compute_totals(game)) == []

    def test_lowest_total_wins_when_finished(self):
        game = create_game([[1, 2, 3, 4]], status=GameStatus.FINISHED)
        assert winner_ids(game, compute_totals(game)) == [1]

    def test_shared_lowest_gives_several_winners(self):
        game = create_game([[2, 2, 3, 4]], status=GameStatus.FINISHED)
        assert winner_ids(game, compute_totals(game)) == [1, 2]

    def test_global_tie_has_no_winner(self):
        game = create_game([[7, 7, 7, 7]], status=GameStatus.FINISHED)
        assert winner_ids(game, compute_totals(game)) == []


class TestClassifyCell:
    def test_ties_share_lowest(self):
        scores = [5, 5, 9]
        assert [classify_cell(score, scores) for score in scores] == [
            CellRank.LOWEST,
            CellRank.LOWEST,
            CellRank.HIGHEST,
        ]

    def test_absent_target_is_neutral(self):
        assert classify_cell(None, [None, 1, 2]) == CellRank.NEUTRAL

    def test_single_present_score_is_neutral(self):
        assert classify_cell(4, [4, None, None]) == CellRank.NEUTRAL

    def test_all_equal_is_neutral(self):
        assert classify_cell(3, [3, 3, None, 3]) == CellRank.NEUTRAL

    def test_middle_value_is_neutral(self):
        assert classify_cell(20, [0, 20, 20, 40]) == CellRank.NEUTRAL

    def test_zero_can_be_lowest(self):
        assert classify_cell(0, [0, 10]) == CellRank.LOWEST

    def test_absent_values_do_not_count_as_zero(self):
        assert classify_cell(5, [5, None, 9]) == CellRank.LOWEST


class TestClassifyRound:
    def test_four_player_spread(self):
        game = create_game([[0, 20, 20, 40]])

        assert classify_round(game, 0) == {
            1: CellRank.LOWEST,
            2: CellRank.NEUTRAL,
            3: CellRank.NEUTRAL,
            4: CellRank.HIGHEST,
        }

    def test_partially_entered_round(self):
        game = create_game([[7, None, None, None]])
        assert set(classify_round(game, 0).values()) == {CellRank.NEUTRAL}


class TestClassifyTotal:
    def test_neutral_on_tie(self):
        summary = RankingSummary(4, 4, is_tie=True)
        assert classify_total(4, summary) == CellRank.NEUTRAL

    @pytest.mark.parametrize(
        ("total", "expected"),
        [(0, CellRank.LOWEST), (20, CellRank.NEUTRAL), (40, CellRank.HIGHEST)],
    )
    def test_spread(self, total, expected):
        summary = RankingSummary(0, 40, is_tie=False)
        assert classify_total(total, summary) == expected


class TestScenarios:
    def test_two_player_tie_has_no_winner_after_finishing(self):
        game = create_game(players=create_players(2))
        rows = [("10", "3"), ("", "7"), ("5", "5")]
        for index, (first, second) in enumerate(rows):
            if index > 0:
                game = append_round(game, empty_round(game.player_ids))
            game = set_score(game, index, 1, first)
            game = set_score(game, index, 2, second)

        totals = compute_totals(game)
        finished = finish_game(game)

        assert game.rounds[1].score_for(1) is None
        assert totals == {1: 15, 2: 15}
        assert ranking_summary(totals).is_tie is True
        assert winner_ids(finished, totals) == []

    def test_single_round_four_players(self):
        game = create_game([[0, 20, 20, 40]])
        summary = ranking_summary(compute_totals(game))

        assert summary.min_total == 0
        assert summary.max_total == 40
        assert classify_total(0, summary) == CellRank.LOWEST
        assert classify_total(40, summary) == CellRank.HIGHEST
        assert classify_total(20, summary) == CellRank.NEUTRAL
