"""Tests for the True Colors trait classifier."""

import pytest

from interview_assistant.components.assessment.classifier import (
    classify,
    minimum_valid_responses,
    rank_colors,
    tally_colors,
    valid_answers,
)
from interview_assistant.components.assessment.colors import Color
from interview_assistant.components.scoring.errors import IncompleteSubmission, ValidationError
from tests.conftest import balanced_answers, make_answers


class TestValidAnswers:
    def test_unknown_colors_and_missing_ids_are_dropped(self):
        responses = [
            {"questionId": "Q1", "color": "gold"},
            {"questionId": "Q2", "color": "purple"},
            {"questionId": "", "color": "blue"},
            {"color": "green"},
            {"questionId": "Q5", "color": None},
            {"questionId": "Q6", "color": "ORANGE"},
        ]
        assert valid_answers(responses) == [("Q1", Color.GOLD), ("Q6", Color.ORANGE)]

    def test_accepts_snake_case_keys(self):
        assert valid_answers([{"question_id": "Q1", "color": "blue"}]) == [("Q1", Color.BLUE)]

    def test_repeated_question_keeps_last_valid_color(self):
        responses = [
            {"questionId": "Q1", "color": "gold"},
            {"questionId": "Q2", "color": "blue"},
            {"questionId": "Q1", "color": "green"},
            {"questionId": "Q1", "color": "teal"},
        ]
        assert valid_answers(responses) == [("Q1", Color.GREEN), ("Q2", Color.BLUE)]


class TestTally:
    def test_counts_sum_to_valid_responses(self):
        colors = [Color.GOLD] * 7 + [Color.GREEN] * 3 + [Color.BLUE] * 5
        tallies = tally_colors(colors)
        assert sum(t.count for t in tallies.values()) == 15
        assert tallies[Color.ORANGE].count == 0
        assert tallies[Color.ORANGE].percentage == 0

    def test_percentages_round_half_up(self):
        # 1/8 = 12.5% rounds to 13, not to even
        colors = [Color.GOLD] + [Color.BLUE] * 7
        tallies = tally_colors(colors)
        assert tallies[Color.GOLD].percentage == 13
        assert tallies[Color.BLUE].percentage == 88

    def test_percentages_need_not_sum_to_100(self):
        colors = [Color.GOLD, Color.GREEN, Color.ORANGE]
        tallies = tally_colors(colors)
        assert [tallies[c].percentage for c in (Color.GOLD, Color.GREEN, Color.ORANGE)] == [33, 33, 33]
        assert sum(t.percentage for t in tallies.values()) == 99


class TestRanking:
    def test_even_split_ranks_in_declaration_order(self):
        classification = classify(balanced_answers())
        ranking = classification.ranking
        assert [entry.color for entry in ranking.all] == [Color.GOLD, Color.GREEN, Color.ORANGE, Color.BLUE]
        assert all(entry.percentage == 25 for entry in ranking.all)
        assert ranking.primary.color == Color.GOLD

    def test_ties_break_by_declaration_order_not_input_order(self):
        colors = ["blue"] * 6 + ["orange"] * 6 + ["green"] * 4 + ["gold"] * 4
        ranking = classify(make_answers(colors)).ranking
        assert [entry.color for entry in ranking.all] == [Color.ORANGE, Color.BLUE, Color.GOLD, Color.GREEN]

    def test_descending_by_count(self):
        colors = ["green"] * 10 + ["blue"] * 6 + ["gold"] * 3 + ["orange"]
        ranking = classify(make_answers(colors)).ranking
        assert [entry.count for entry in ranking.all] == [10, 6, 3, 1]
        assert ranking.by_role()["quaternary"].color == Color.ORANGE

    def test_each_role_carries_its_profile(self):
        ranking = classify(balanced_answers()).ranking
        assert ranking.primary.profile.name == "Gold"
        assert ranking.secondary.profile.name == "Green"

    def test_rank_is_repeatable(self):
        tallies = tally_colors([Color.BLUE, Color.GOLD, Color.BLUE, Color.GREEN])
        assert rank_colors(tallies) == rank_colors(tallies)


class TestCompletionThreshold:
    def test_minimum_for_twenty_questions(self):
        assert minimum_valid_responses(20, 0.75) == 15

    def test_exactly_three_quarters_is_accepted(self):
        classification = classify(make_answers(["gold"] * 15))
        assert classification.valid_count == 15
        assert classification.ranking.primary.percentage == 100

    def test_one_fewer_is_rejected(self):
        with pytest.raises(IncompleteSubmission) as exc_info:
            classify(make_answers(["gold"] * 14))
        assert exc_info.value.valid_count == 14
        assert "75%" in exc_info.value.message

    def test_invalid_answers_do_not_count_toward_threshold(self):
        responses = make_answers(["gold"] * 14 + ["teal"] * 6)
        with pytest.raises(IncompleteSubmission):
            classify(responses)

    def test_repeated_question_does_not_pass_threshold(self):
        responses = [{"questionId": "Q1", "color": "gold"}] * 15
        with pytest.raises(IncompleteSubmission) as exc_info:
            classify(responses)
        assert exc_info.value.valid_count == 1

    def test_empty_submission_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            classify([])

    def test_custom_threshold(self):
        classification = classify(make_answers(["blue"] * 10), min_completion=0.5)
        assert classification.valid_count == 10
