"""Shared fixtures for the game core tests."""

import random

import pytest

from timestables.models import QuestionAmount, Settings


@pytest.fixture
def rng():
    return random.Random(20210531)


@pytest.fixture
def ordered_settings():
    return Settings(table=3, max_multiplier=5, question_amount=QuestionAmount.ALL, random_order=False)
