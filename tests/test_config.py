"""
Tests for GameConfig parsing and config.py loading.
"""
import json

import pytest

from timestables.config import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH, load_config, resolve_config_path
from timestables.errors import InvalidSettings
from timestables.models import (
    ALL_PRODUCTS,
    ANIMALS,
    MAX_DECOYS,
    MAX_DISTRACTORS,
    CandidateState,
    DecoyCandidate,
    GameConfig,
    NumberCandidate,
    Question,
    QuestionAmount,
    Settings,
)
from timestables.session import start_session


class TestGameConfig:
    def test_defaults(self):
        config = GameConfig()
        assert config.tile_count == 16
        assert config.decoy_state_on_correct is CandidateState.FADED
        assert config.decoy_state_on_wrong is CandidateState.FADED
        assert (config.correct_delay, config.incorrect_delay) == (0.75, 1.5)

    def test_round_trip_through_dict(self):
        config = GameConfig(distractor_count=7, decoy_count=2, decoy_state_on_wrong=CandidateState.WRONG_CHOSEN)
        assert GameConfig.from_dict(config.to_dict()) == config

    def test_missing_keys_keep_defaults(self):
        assert GameConfig.from_dict({"decoy_count": 0}) == GameConfig(decoy_count=0)

    def test_only_game_rules_are_configurable(self):
        assert set(GameConfig().to_dict()) == {
            "distractor_count",
            "decoy_count",
            "decoy_state_on_correct",
            "decoy_state_on_wrong",
            "correct_delay",
            "incorrect_delay",
            "flip_questions",
        }

    @pytest.mark.parametrize("payload", [
        {"distractor_count": "many"},
        {"decoy_count": -3},
        {"decoy_state_on_correct": "sparkly"},
        {"incorrect_delay": "soon"},
        {"correct_delay": -1},
        {"flip_questions": "false"},
        {"flip_questions": 0},
        {"distractor_count": 9.7},
        {"decoy_count": True},
        {"correct_delay": float("nan")},
        {"incorrect_delay": float("inf")},
        {"correct_delay": False},
    ])
    def test_invalid_payloads(self, payload):
        with pytest.raises(InvalidSettings):
            GameConfig.from_dict(payload)

    def test_flip_questions_must_be_a_real_boolean(self):
        assert GameConfig.from_dict({"flip_questions": False}).flip_questions is False
        with pytest.raises(InvalidSettings):
            GameConfig.from_dict({"flip_questions": "false"})

    def test_whole_number_delays_are_accepted(self):
        assert GameConfig.from_dict({"correct_delay": 1}).correct_delay == 1.0

    @pytest.mark.parametrize("payload", [
        {"decoy_count": MAX_DECOYS + 1},
        {"distractor_count": MAX_DISTRACTORS + 1},
        {"decoy_count": 31},
        {"distractor_count": 200},
    ])
    def test_counts_beyond_the_catalogs(self, payload):
        with pytest.raises(InvalidSettings):
            GameConfig.from_dict(payload)

    def test_largest_counts_still_start_a_session(self, rng):
        config = GameConfig(distractor_count=MAX_DISTRACTORS, decoy_count=MAX_DECOYS)
        config.validate()
        game = start_session(Settings(), config, rng=rng)
        assert len(game.answer_set) == len(ALL_PRODUCTS) + len(ANIMALS)

    def test_validate_rejects_nan_built_directly(self):
        with pytest.raises(InvalidSettings):
            GameConfig(incorrect_delay=float("nan")).validate()


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "absent.json") == GameConfig()

    def test_reads_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"distractor_count": 5, "flip_questions": False}), encoding="utf-8")
        config = load_config(path)
        assert config.distractor_count == 5
        assert config.flip_questions is False

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_config(path) == GameConfig()

    def test_non_object_gives_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_config(path) == GameConfig()

    def test_out_of_range_values_raise(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"decoy_count": -1}), encoding="utf-8")
        with pytest.raises(InvalidSettings):
            load_config(path)

    @pytest.mark.parametrize("payload", [
        {"decoy_count": 31},
        {"distractor_count": 200},
        {"flip_questions": "false"},
        {"distractor_count": 9.7},
    ])
    def test_unusable_values_fail_at_load(self, tmp_path, payload):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(InvalidSettings):
            load_config(path)

    def test_environment_override(self, tmp_path, monkeypatch):
        path = tmp_path / "rules.json"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert resolve_config_path() == path

    def test_default_path_sits_beside_the_package(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert resolve_config_path() == DEFAULT_CONFIG_PATH
        assert (DEFAULT_CONFIG_PATH.parent / "timestables").is_dir()


class TestModels:
    def test_question_text(self):
        question = Question(3, 7)
        assert question.as_text() == "3 × 7 ="
        assert question.as_text(flipped=True) == "7 × 3 ="
        assert question.answer == 21

    def test_with_state_returns_new_candidate(self):
        number = NumberCandidate(12)
        revealed = number.with_state(CandidateState.REVEALED)
        assert number.state is CandidateState.NONE
        assert revealed == NumberCandidate(12, CandidateState.REVEALED)
        assert revealed.is_annotated
        assert DecoyCandidate("owl").with_state(CandidateState.FADED).key == "owl"

    def test_question_amount_values(self):
        assert [amount.value for amount in QuestionAmount] == ["5", "10", "20", "All"]
        assert QuestionAmount.ALL.resolve(12) == 11
        assert QuestionAmount.TWENTY.resolve(3) == 20
