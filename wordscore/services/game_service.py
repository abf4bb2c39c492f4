"""
Game Service

Manages game sessions. Each session owns one round controller, its input
boundary and its error banner, and forwards classification, status and error
banner events to the session's room through the injected emitter.
"""

import random
import threading
import time
import uuid
from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, Optional

from ..config.app_config import Config
from ..config.game_settings import load_word_lookup
from ..models.game import Classification, RoundStatus, SubmitOutcome, SubmitResult, WordLookup
from ..utils.error_banner import ErrorBanner
from .input_boundary import InputBoundary
from .round_controller import RoundController

Emitter = Callable[..., None]


def game_room(game_id: str) -> str:
    """Socket room carrying the events of one game."""
    return f"game_{game_id}"


@dataclass
class GameSession:
    """Everything belonging to one player's game."""
    game_id: str
    controller: RoundController
    input: InputBoundary
    banner: ErrorBanner
    created_at: float = field(default_factory=time.time)
    lock: threading.RLock = field(default_factory=threading.RLock)


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Secret word selection without exposing it to clients before the round ends
    - Guess submission and key input per session
    - Forwarding letter classifications and round status to subscribers
    """

    def __init__(self,
                 lookup: Optional[WordLookup] = None,
                 config_class=Config,
                 emitter: Optional[Emitter] = None,
                 timer_factory=threading.Timer):
        self.config = config_class
        self.lookup = lookup or load_word_lookup(
            config_class.SECRET_WORDS_FILE,
            config_class.ALL_WORDS_FILE,
            config_class.WORD_LENGTH,
        )
        self.emitter = emitter
        self.timer_factory = timer_factory
        self.messages = {
            SubmitOutcome.INVALID_WORD: config_class.INVALID_WORD_MESSAGE,
            SubmitOutcome.ALREADY_GUESSED: config_class.ALREADY_GUESSED_MESSAGE,
            SubmitOutcome.INCOMPLETE_WORD: config_class.INCOMPLETE_WORD_MESSAGE,
        }
        self.games: Dict[str, GameSession] = {}
        self._games_lock = threading.Lock()

    def _emit(self, event: str, data: Dict, game_id: str) -> None:
        if self.emitter is not None:
            self.emitter(event, data, room=game_room(game_id))

    def create_new_game(self, seed: Optional[int] = None, secret_word: Optional[str] = None) -> str:
        """
        Creates a new game session with a randomly selected secret word.

        Args:
            seed: Seed for reproducible secret selection
            secret_word: Fixed first secret (testing and practice)

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())

        controller = RoundController(
            self.lookup,
            word_length=self.config.WORD_LENGTH,
            max_guesses=self.config.MAX_GUESSES,
            secret_word=secret_word,
            strict=self.config.STRICT_KNOWLEDGE,
            rng=random.Random(seed),
        )
        banner = ErrorBanner(
            duration=self.config.ERROR_MESSAGE_DURATION,
            on_show=lambda message: self._emit(
                'error_shown', {'game_id': game_id, 'message': message}, game_id),
            on_hide=lambda: self._emit('error_hidden', {'game_id': game_id}, game_id),
            timer_factory=self.timer_factory,
        )
        boundary = InputBoundary(
            controller,
            banner=banner,
            messages=self.messages,
            unique_letters=self.config.UNIQUE_LETTERS,
        )

        def forward_classification(letter: str, classification: Classification) -> None:
            self._emit('letter_classified', {
                'game_id': game_id,
                'letter': letter,
                'classification': classification.value,
            }, game_id)

        controller.subscribe(forward_classification)

        with self._games_lock:
            self.games[game_id] = GameSession(game_id, controller, boundary, banner)
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[RoundStatus]:
        """
        Returns the current round status (the secret only once the round is over).

        Returns:
            RoundStatus or None if game not found
        """
        session = self.get_session(game_id)
        if session is None:
            return None
        with session.lock:
            return self._status(session)

    def _status(self, session: GameSession) -> RoundStatus:
        status = session.controller.status(session.game_id)
        status.buffer = session.input.buffer
        status.error_message = session.banner.message
        return status

    def _broadcast_status(self, session: GameSession) -> RoundStatus:
        status = self._status(session)
        self._emit('round_status', asdict(status), session.game_id)
        return status

    def make_guess(self, game_id: str, guess: str) -> Optional[SubmitResult]:
        """
        Submits a whole word, bypassing the key buffer.

        Returns:
            SubmitResult or None if game not found
        """
        session = self.get_session(game_id)
        if session is None:
            return None
        with session.lock:
            result = session.controller.submit(guess)
            if result.outcome.is_rejection:
                session.banner.show(self.messages[result.outcome])
            self._broadcast_status(session)
            return result

    def press_key(self, game_id: str, key: str) -> Optional[bool]:
        """
        Applies one key command (letter, DEL, ENT, GIVEUP, CONTINUE).

        Raises:
            ValueError: If the key is not recognised
        """
        session = self.get_session(game_id)
        if session is None:
            return None
        with session.lock:
            changed = session.input.press_key(key)
            self._broadcast_status(session)
            return changed

    def give_up(self, game_id: str) -> Optional[bool]:
        session = self.get_session(game_id)
        if session is None:
            return None
        with session.lock:
            changed = session.input.give_up()
            self._broadcast_status(session)
            return changed

    def continue_game(self, game_id: str) -> Optional[bool]:
        session = self.get_session(game_id)
        if session is None:
            return None
        with session.lock:
            changed = session.input.continue_round()
            self._broadcast_status(session)
            return changed

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._games_lock:
            session = self.games.pop(game_id, None)
        if session is None:
            return False
        session.banner.clear()
        return True

    @property
    def active_games(self) -> int:
        return len(self.games)
