"""
Tests for questions.py — fixed and "All" question sets plus validation.
"""
import random

import pytest

from timestables.errors import InvalidSettings
from timestables.models import Question, QuestionAmount, Settings
from timestables.questions import generate_questions


class TestFixedAmounts:
    @pytest.mark.parametrize("amount,expected", [
        (QuestionAmount.FIVE, 5),
        (QuestionAmount.TEN, 10),
        (QuestionAmount.TWENTY, 20),
    ])
    def test_length_matches_amount(self, rng, amount, expected):
        settings = Settings(table=7, max_multiplier=9, question_amount=amount)
        questions = generate_questions(settings, rng)
        assert len(questions) == expected

    def test_every_question_uses_table_and_range(self, rng):
        settings = Settings(table=4, max_multiplier=4, question_amount=QuestionAmount.FIVE)
        questions = generate_questions(settings, rng)
        assert len(questions) == 5
        for question in questions:
            assert question.multiplicand == 4
            assert question.multiplier in {2, 3, 4}

    def test_repeats_are_allowed(self, rng):
        # 20 draws from {2, 3} must repeat.
        settings = Settings(table=5, max_multiplier=3, question_amount=QuestionAmount.TWENTY)
        questions = generate_questions(settings, rng)
        assert len(set(questions)) <= 2

    def test_random_order_flag_is_ignored(self):
        a = generate_questions(
            Settings(table=6, max_multiplier=12, question_amount=QuestionAmount.TEN, random_order=False),
            random.Random(3),
        )
        b = generate_questions(
            Settings(table=6, max_multiplier=12, question_amount=QuestionAmount.TEN, random_order=True),
            random.Random(3),
        )
        assert a == b

    def test_same_seed_same_questions(self):
        settings = Settings(table=9, max_multiplier=12, question_amount=QuestionAmount.TWENTY)
        assert generate_questions(settings, random.Random(8)) == generate_questions(settings, random.Random(8))


class TestAllAmount:
    def test_ordered_example(self, ordered_settings, rng):
        questions = generate_questions(ordered_settings, rng)
        assert questions == (Question(3, 2), Question(3, 3), Question(3, 4), Question(3, 5))
        assert [q.answer for q in questions] == [6, 9, 12, 15]

    def test_count_is_max_multiplier_minus_one(self, rng):
        settings = Settings(table=2, max_multiplier=12, question_amount=QuestionAmount.ALL, random_order=False)
        assert len(generate_questions(settings, rng)) == 11
        assert settings.question_count == 11

    def test_random_order_is_a_permutation(self, rng):
        settings = Settings(table=8, max_multiplier=12, question_amount=QuestionAmount.ALL, random_order=True)
        questions = generate_questions(settings, rng)
        multipliers = [q.multiplier for q in questions]
        assert sorted(multipliers) == list(range(2, 13))
        assert all(q.multiplicand == 8 for q in questions)

    def test_random_order_uses_the_source(self):
        settings = Settings(table=8, max_multiplier=12, question_amount=QuestionAmount.ALL, random_order=True)
        orders = {generate_questions(settings, random.Random(seed)) for seed in range(5)}
        assert len(orders) > 1

    def test_smallest_range(self, rng):
        settings = Settings(table=12, max_multiplier=2, question_amount=QuestionAmount.ALL, random_order=True)
        assert generate_questions(settings, rng) == (Question(12, 2),)


class TestValidation:
    @pytest.mark.parametrize("kwargs", [
        {"table": 1},
        {"table": 13},
        {"max_multiplier": 1},
        {"max_multiplier": 13},
        {"table": "3"},
        {"max_multiplier": 4.0},
        {"table": True},
        {"question_amount": "5"},
        {"random_order": 1},
    ])
    def test_invalid_settings_raise(self, rng, kwargs):
        with pytest.raises(InvalidSettings):
            generate_questions(Settings(**kwargs), rng)

    def test_invalid_settings_is_a_value_error(self, rng):
        with pytest.raises(ValueError):
            generate_questions(Settings(max_multiplier=0), rng)

    def test_defaults_are_valid(self):
        questions = generate_questions(Settings())
        assert len(questions) == 10
        assert all(q.multiplicand == 2 for q in questions)
