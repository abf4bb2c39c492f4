"""Tests for the round state machine and submission pipeline."""

import random

import pytest

from wordscore.models.game import Classification, RoundState, SubmitOutcome, WordLookup
from wordscore.services.knowledge import ClassificationConflict
from wordscore.services.round_controller import RoundController


class TestSubmission:

    def setup_method(self):
        self.lookup = WordLookup.from_words(
            ["WORD", "PART", "RAIN"],
            ["WORE", "RANT", "RANS", "MOLD", "AAII"],
        )
        self.controller = RoundController(self.lookup, secret_word="WORD", strict=True)

    def test_end_to_end_win(self):
        """WORE scores 3, then WORD wins on the second guess."""
        result = self.controller.submit("WORE")
        assert result.outcome is SubmitOutcome.ACCEPTED
        assert result.score == 3
        assert self.controller.state is RoundState.IN_PROGRESS

        result = self.controller.submit("WORD")
        assert result.outcome is SubmitOutcome.WON
        assert self.controller.state is RoundState.WON
        assert self.controller.guess_count == 2
        for letter in "WORD":
            assert self.controller.knowledge.get(letter) is Classification.RIGHT

    def test_win_completes_earlier_guesses(self):
        """Once W, O, R are right, WORE's score of 3 leaves E wrong."""
        self.controller.submit("WORE")
        self.controller.submit("WORD")
        assert self.controller.knowledge.get("E") is Classification.WRONG

    def test_win_is_case_insensitive(self):
        result = self.controller.submit("word")
        assert result.outcome is SubmitOutcome.WON

    def test_already_guessed_leaves_history_unchanged(self):
        self.controller.submit("WORE")
        result = self.controller.submit("WORE")

        assert result.outcome is SubmitOutcome.ALREADY_GUESSED
        assert len(self.controller.history) == 1
        assert self.controller.guess_count == 1

    def test_invalid_word_rejected(self):
        result = self.controller.submit("ZZZZ")
        assert result.outcome is SubmitOutcome.INVALID_WORD
        assert result.outcome.is_rejection
        assert self.controller.guess_count == 0

    def test_incomplete_word_rejected(self):
        result = self.controller.submit("WOR")
        assert result.outcome is SubmitOutcome.INCOMPLETE_WORD
        assert not result.accepted

    def test_over_count_scoring_through_controller(self):
        controller = RoundController(self.lookup, secret_word="RAIN", strict=True)
        result = controller.submit("AAII")
        assert result.score == 4
        assert controller.knowledge.right_letters == {"A", "I"}

    def test_cross_guess_inference_after_submission(self):
        controller = RoundController(self.lookup, secret_word="PART", strict=True)
        assert controller.submit("RANT").score == 3
        assert controller.submit("RANS").score == 2

        assert controller.knowledge.get("S") is Classification.WRONG
        assert controller.knowledge.get("T") is Classification.RIGHT

    def test_classification_sink_receives_each_letter_once(self):
        events = []
        self.controller.subscribe(lambda letter, value: events.append((letter, value)))

        self.controller.submit("WORE")
        self.controller.submit("WORD")

        letters = [letter for letter, _ in events]
        assert sorted(letters) == ["D", "E", "O", "R", "W"]
        assert len(letters) == len(set(letters))

    def test_sink_sees_a_letter_before_letters_deduced_from_it(self):
        events = []
        self.controller.subscribe(lambda letter, value: events.append(letter))

        self.controller.submit("WORE")
        self.controller.submit("WORD")

        # R completes the three right letters of WORE, which makes E wrong
        assert events == ["W", "O", "R", "E", "D"]

    def test_status_hides_secret_until_round_ends(self):
        self.controller.submit("WORE")
        status = self.controller.status("abc")
        assert status.secret_word is None
        assert status.game_id == "abc"
        assert status.guesses[0]["word"] == "WORE"
        assert status.guesses[0]["score"] == 3
        assert [tile["letter"] for tile in status.guesses[0]["tiles"]] == list("WORE")

        self.controller.submit("WORD")
        assert self.controller.status().secret_word == "WORD"


class TestRoundLifecycle:

    def setup_method(self):
        self.lookup = WordLookup.from_words(
            ["WORD", "PART", "RAIN"],
            ["WORE", "RANT", "MOLD"],
        )

    def test_loss_after_max_guesses(self):
        controller = RoundController(self.lookup, max_guesses=3, secret_word="WORD", strict=True)

        assert controller.submit("WORE").outcome is SubmitOutcome.ACCEPTED
        assert controller.submit("RANT").outcome is SubmitOutcome.ACCEPTED
        result = controller.submit("MOLD")

        assert result.outcome is SubmitOutcome.LOST
        assert controller.state is RoundState.LOST
        assert controller.status().secret_word == "WORD"

    def test_win_on_last_guess_is_a_win(self):
        controller = RoundController(self.lookup, max_guesses=2, secret_word="WORD", strict=True)
        controller.submit("WORE")
        assert controller.submit("WORD").outcome is SubmitOutcome.WON

    def test_submission_after_round_over_is_a_no_op(self):
        controller = RoundController(self.lookup, secret_word="WORD", strict=True)
        controller.submit("WORD")

        result = controller.submit("WORE")
        assert result.outcome is SubmitOutcome.ROUND_OVER
        assert controller.guess_count == 1

    def test_give_up(self):
        controller = RoundController(self.lookup, secret_word="WORD", strict=True)
        controller.submit("WORE")

        assert controller.give_up() is True
        assert controller.state is RoundState.LOST
        assert controller.give_up() is False

    def test_continue_resets_round_with_new_secret(self):
        controller = RoundController(
            self.lookup, secret_word="WORD", strict=True, rng=random.Random(5)
        )
        controller.submit("WORE")
        controller.submit("WORD")

        assert controller.continue_round() is True
        assert controller.state is RoundState.IN_PROGRESS
        assert controller.secret_word != "WORD"
        assert controller.secret_word in self.lookup.secrets
        assert controller.guess_count == 0
        assert len(controller.history) == 0
        assert len(controller.knowledge) == 0
        assert controller.submit("WORE").outcome is SubmitOutcome.ACCEPTED

    def test_continue_refused_while_in_progress(self):
        controller = RoundController(self.lookup, secret_word="WORD")
        assert controller.continue_round() is False
        assert controller.secret_word == "WORD"

    def test_continue_rejects_repeated_secret(self):
        controller = RoundController(self.lookup, secret_word="WORD")
        controller.give_up()
        with pytest.raises(ValueError):
            controller.continue_round("WORD")

    def test_random_secret_comes_from_secret_list(self):
        controller = RoundController(self.lookup, rng=random.Random(1))
        assert controller.secret_word in self.lookup.secrets

    def test_conflicting_deduction_still_records_the_guess(self):
        lookup = WordLookup.from_words(["RAIN"], ["NBCC", "AABC"])
        controller = RoundController(lookup, secret_word="RAIN", strict=True)
        controller.submit("NBCC")

        with pytest.raises(ClassificationConflict):
            controller.submit("AABC")

        assert controller.guess_count == 2
        assert [record.word for record in controller.history] == ["NBCC", "AABC"]

        result = controller.submit("AABC")
        assert result.outcome is SubmitOutcome.ALREADY_GUESSED
        assert len(controller.history) == 2
        assert controller.guess_count == 2

    def test_continue_rejects_secret_of_wrong_length(self):
        controller = RoundController(self.lookup, secret_word="WORD")
        controller.give_up()

        with pytest.raises(ValueError):
            controller.continue_round("ZZZZZZ")
        assert controller.secret_word == "WORD"
        assert controller.state is RoundState.LOST

    def test_continue_rejects_secret_outside_secret_list(self):
        controller = RoundController(self.lookup, secret_word="WORD")
        controller.give_up()

        with pytest.raises(ValueError):
            controller.continue_round("MOLD")
        assert controller.continue_round("rain") is True
        assert controller.secret_word == "RAIN"

    def test_secret_must_come_from_secret_list(self):
        with pytest.raises(ValueError):
            RoundController(self.lookup, secret_word="MOLD")

    def test_secret_length_must_match(self):
        with pytest.raises(ValueError):
            RoundController(self.lookup, secret_word="WORDS")

    def test_max_guesses_must_be_positive(self):
        with pytest.raises(ValueError):
            RoundController(self.lookup, max_guesses=0)
