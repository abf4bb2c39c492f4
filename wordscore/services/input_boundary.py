"""
Input Boundary

Turns discrete key commands into round controller calls. Holds the letters
typed so far for the guess in progress.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from ..models.game import SubmitOutcome, SubmitResult
from ..utils.error_banner import ErrorBanner
from .round_controller import RoundController


class CommandType(Enum):
    LETTER = "LETTER"
    DELETE = "DELETE"
    SUBMIT = "SUBMIT"
    GIVE_UP = "GIVE_UP"
    CONTINUE = "CONTINUE"


_KEY_ALIASES = {
    "DEL": CommandType.DELETE,
    "DELETE": CommandType.DELETE,
    "BACKSPACE": CommandType.DELETE,
    "ENT": CommandType.SUBMIT,
    "ENTER": CommandType.SUBMIT,
    "SUBMIT": CommandType.SUBMIT,
    "GIVEUP": CommandType.GIVE_UP,
    "GIVE_UP": CommandType.GIVE_UP,
    "CONTINUE": CommandType.CONTINUE,
}


@dataclass(frozen=True)
class Command:
    type: CommandType
    letter: Optional[str] = None

    @classmethod
    def parse(cls, key: str) -> "Command":
        """
        Parse a key name: a single letter, or one of DEL, ENT, GIVEUP, CONTINUE
        (and their aliases).

        Raises:
            ValueError: If the key is not recognised
        """
        name = (key or "").strip().upper()
        if name in _KEY_ALIASES:
            return cls(_KEY_ALIASES[name])
        if len(name) == 1 and name.isalpha():
            return cls(CommandType.LETTER, name)
        raise ValueError(f"Unrecognised key: {key!r}")


DEFAULT_MESSAGES: Dict[SubmitOutcome, str] = {
    SubmitOutcome.INVALID_WORD: "Not in word list",
    SubmitOutcome.ALREADY_GUESSED: "Already guessed",
    SubmitOutcome.INCOMPLETE_WORD: "Not enough letters",
}


class InputBoundary:
    """
    Letter buffer plus command dispatch for one round controller.

    Args:
        controller: Round being played
        banner: Display slot for rejection messages
        messages: Rejection message text per outcome
        unique_letters: Refuse a letter that is already in the buffer
    """

    def __init__(self,
                 controller: RoundController,
                 banner: Optional[ErrorBanner] = None,
                 messages: Optional[Dict[SubmitOutcome, str]] = None,
                 unique_letters: bool = False):
        self.controller = controller
        self.banner = banner
        self.messages = {**DEFAULT_MESSAGES, **(messages or {})}
        self.unique_letters = unique_letters
        self._letters: List[str] = []
        self.last_result: Optional[SubmitResult] = None

    @property
    def buffer(self) -> str:
        return "".join(self._letters)

    def press_key(self, key: str) -> bool:
        return self.handle(Command.parse(key))

    def handle(self, command: Command) -> bool:
        """
        Apply a command.

        Returns:
            bool: True if the command changed anything
        """
        if command.type is CommandType.LETTER:
            return self.add_letter(command.letter)
        if command.type is CommandType.DELETE:
            return self.delete()
        if command.type is CommandType.SUBMIT:
            return self.submit().accepted
        if command.type is CommandType.GIVE_UP:
            return self.give_up()
        return self.continue_round()

    def add_letter(self, letter: str) -> bool:
        letter = letter.upper()
        if not self.controller.in_progress:
            return False
        if len(self._letters) >= self.controller.word_length:
            return False
        if not self.controller.keyboard.is_selectable(letter):
            return False
        if self.unique_letters and letter in self._letters:
            return False
        self._letters.append(letter)
        return True

    def delete(self) -> bool:
        if not self._letters or not self.controller.in_progress:
            return False
        self._letters.pop()
        return True

    def submit(self) -> SubmitResult:
        result = self.controller.submit(self.buffer)
        self.last_result = result

        if result.outcome.is_rejection:
            if self.banner is not None:
                self.banner.show(self.messages[result.outcome])
        elif result.accepted:
            self._letters.clear()
        return result

    def give_up(self) -> bool:
        if not self.controller.give_up():
            return False
        self._letters.clear()
        return True

    def continue_round(self) -> bool:
        if not self.controller.continue_round():
            return False
        self._letters.clear()
        self.last_result = None
        if self.banner is not None:
            self.banner.clear()
        return True
