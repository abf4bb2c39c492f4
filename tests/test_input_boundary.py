"""Tests for key command parsing and the letter buffer."""

import pytest

from wordscore.models.game import Classification, RoundState, SubmitOutcome
from wordscore.services.input_boundary import Command, CommandType, InputBoundary
from wordscore.services.round_controller import RoundController
from wordscore.utils.error_banner import ErrorBanner


class TestCommandParse:

    def test_letters(self):
        assert Command.parse("a") == Command(CommandType.LETTER, "A")
        assert Command.parse("Z") == Command(CommandType.LETTER, "Z")

    @pytest.mark.parametrize("key,expected", [
        ("DEL", CommandType.DELETE),
        ("backspace", CommandType.DELETE),
        ("ENT", CommandType.SUBMIT),
        ("enter", CommandType.SUBMIT),
        ("GIVEUP", CommandType.GIVE_UP),
        ("continue", CommandType.CONTINUE),
    ])
    def test_named_keys(self, key, expected):
        assert Command.parse(key).type is expected

    @pytest.mark.parametrize("key", ["", "1", "AB", "SPACE"])
    def test_unknown_keys_raise(self, key):
        with pytest.raises(ValueError):
            Command.parse(key)


class TestInputBoundary:

    @pytest.fixture(autouse=True)
    def setup(self, lookup, timer_factory):
        self.timer_factory = timer_factory
        self.controller = RoundController(lookup, secret_word="WORD", strict=True)
        self.banner = ErrorBanner(duration=2.0, timer_factory=timer_factory)
        self.boundary = InputBoundary(self.controller, banner=self.banner)

    def type_word(self, word):
        for letter in word:
            self.boundary.press_key(letter)

    def test_buffer_holds_at_most_word_length_letters(self):
        self.type_word("WORE")
        assert self.boundary.press_key("S") is False
        assert self.boundary.buffer == "WORE"

    def test_delete_removes_last_letter(self):
        self.type_word("WOR")
        assert self.boundary.press_key("DEL") is True
        assert self.boundary.buffer == "WO"

    def test_delete_on_empty_buffer(self):
        assert self.boundary.press_key("DEL") is False

    def test_accepted_submission_clears_buffer(self):
        self.type_word("WORE")
        assert self.boundary.press_key("ENT") is True
        assert self.boundary.buffer == ""
        assert self.boundary.last_result.score == 3

    def test_rejection_keeps_buffer_and_shows_message(self):
        self.type_word("ZZZZ")
        assert self.boundary.press_key("ENT") is False

        assert self.boundary.buffer == "ZZZZ"
        assert self.boundary.last_result.outcome is SubmitOutcome.INVALID_WORD
        assert self.banner.message == "Not in word list"

    def test_incomplete_submission_message(self):
        self.type_word("WO")
        self.boundary.press_key("ENT")
        assert self.banner.message == "Not enough letters"
        assert self.boundary.buffer == "WO"

    def test_already_guessed_message(self):
        self.type_word("WORE")
        self.boundary.press_key("ENT")
        self.type_word("WORE")
        self.boundary.press_key("ENT")
        assert self.banner.message == "Already guessed"

    def test_wrong_letters_cannot_be_typed(self):
        self.controller.knowledge.classify("E", Classification.WRONG)
        assert self.boundary.press_key("E") is False
        assert self.boundary.buffer == ""

    def test_unique_letters_mode(self):
        boundary = InputBoundary(self.controller, unique_letters=True)
        assert boundary.press_key("A") is True
        assert boundary.press_key("A") is False
        assert boundary.buffer == "A"

    def test_give_up_and_continue(self):
        self.type_word("WO")
        assert self.boundary.press_key("GIVEUP") is True
        assert self.controller.state is RoundState.LOST
        assert self.boundary.buffer == ""
        assert self.boundary.press_key("A") is False

        assert self.boundary.press_key("CONTINUE") is True
        assert self.controller.state is RoundState.IN_PROGRESS
        assert self.boundary.press_key("A") is True

    def test_continue_clears_visible_error(self):
        self.type_word("ZZZZ")
        self.boundary.press_key("ENT")
        self.boundary.press_key("GIVEUP")
        self.boundary.press_key("CONTINUE")
        assert self.banner.message is None

    def test_winning_submission_clears_buffer(self):
        self.type_word("WORD")
        assert self.boundary.press_key("ENT") is True
        assert self.controller.state is RoundState.WON
        assert self.boundary.buffer == ""
