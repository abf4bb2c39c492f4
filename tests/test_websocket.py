"""Tests for the Socket.IO game events."""

import pytest

from wordscore import create_app
from wordscore.config.app_config import TestingConfig


class TestWebsocketHandlers:

    @pytest.fixture(autouse=True)
    def setup(self, lookup, timer_factory):
        self.app, self.socketio = create_app(TestingConfig, lookup=lookup, timer_factory=timer_factory)
        self.game_id = self.app.game_service.create_new_game(secret_word="WORD")
        self.client = self.socketio.test_client(self.app)
        yield
        if self.client.is_connected():
            self.client.disconnect()

    def received(self, name):
        return [message["args"][0] for message in self.client.get_received() if message["name"] == name]

    def join(self):
        self.client.emit("join_game", {"game_id": self.game_id})
        return self.received("round_status")

    def test_join_sends_status(self):
        statuses = self.join()
        assert len(statuses) == 1
        assert statuses[0]["game_id"] == self.game_id
        assert statuses[0]["state"] == "IN_PROGRESS"

    def test_join_unknown_game(self):
        self.client.emit("join_game", {"game_id": "missing"})
        errors = self.received("error")
        assert errors[0]["error"] == "Game not found"

    def test_key_press_broadcasts_status(self):
        self.join()
        self.client.emit("press_key", {"game_id": self.game_id, "key": "W"})
        statuses = self.received("round_status")
        assert statuses[-1]["buffer"] == "W"

    def test_bad_key_reports_error(self):
        self.join()
        self.client.emit("press_key", {"game_id": self.game_id, "key": "??"})
        assert self.received("error")[0]["error"].startswith("Unrecognised key")

    def test_submit_guess_streams_classifications(self):
        self.join()
        self.client.emit("submit_guess", {"game_id": self.game_id, "guess": "WORE"})
        self.client.emit("submit_guess", {"game_id": self.game_id, "guess": "WORD"})

        messages = self.client.get_received()
        results = [m["args"][0] for m in messages if m["name"] == "guess_result"]
        assert [r["outcome"] for r in results] == ["ACCEPTED", "WON"]

        classified = {
            m["args"][0]["letter"]: m["args"][0]["classification"]
            for m in messages if m["name"] == "letter_classified"
        }
        assert classified == {"W": "RIGHT", "O": "RIGHT", "R": "RIGHT", "D": "RIGHT", "E": "WRONG"}

    def test_rejected_guess_shows_error_banner(self):
        self.join()
        self.client.emit("submit_guess", {"game_id": self.game_id, "guess": "ZZZZ"})
        shown = self.received("error_shown")
        assert shown == [{"game_id": self.game_id, "message": TestingConfig.INVALID_WORD_MESSAGE}]

    def test_leave_game_stops_room_events(self):
        self.join()
        self.client.emit("leave_game", {"game_id": self.game_id})
        self.app.game_service.make_guess(self.game_id, "WORE")
        assert self.received("round_status") == []
