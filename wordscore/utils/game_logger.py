"""
Game Logger

JSON-per-line log of what clients ask for, what the server answers and how
rounds end. Lines go to a daily file under ``LOG_DIR``; warnings and errors are
echoed on the console.
"""

import json
import logging
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.app_config import Config
from .helpers import get_user_identity


class GameLogger:

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, level.upper(), logging.INFO)
        self.logger = self._build_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"wordscore_{datetime.now():%Y-%m-%d}.log"

    def _build_logger(self) -> logging.Logger:
        logger = logging.getLogger('wordscore_game')
        logger.setLevel(self.level)
        logger.propagate = False
        # reloading the module must not stack handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        to_file = logging.FileHandler(self.log_file, encoding='utf-8')
        to_file.setLevel(self.level)
        to_file.setFormatter(logging.Formatter('%(asctime)s | %(levelname)s | %(message)s'))

        to_console = logging.StreamHandler()
        to_console.setLevel(logging.WARNING)
        to_console.setFormatter(logging.Formatter('[%(name)s] %(levelname)s %(message)s'))

        logger.addHandler(to_file)
        logger.addHandler(to_console)
        return logger

    def _write(self,
               level: int,
               event_type: str,
               action: str,
               user_info: Dict[str, Optional[str]],
               details: Dict[str, Any]) -> None:
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': {key: value for key, value in details.items() if value is not None},
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self,
                        request,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Record an incoming request.

        Args:
            request: Flask request object
            action: Name of the operation (``new_game``, ``submit_guess``, ``press_key``...)
            game_id: Game the request targets
            **kwargs: Extra fields for the entry
        """
        self._write(logging.INFO, 'USER_ACTION', action, get_user_identity(request), {
            'game_id': game_id,
            'route': f"{request.method} {request.path}",
            **kwargs
        })

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """Record a response; failed responses go out at ERROR."""
        self._write(
            logging.INFO if success else logging.ERROR,
            'SERVER_RESPONSE' if success else 'SERVER_RESPONSE_FAILED',
            action,
            get_user_identity(request),
            {'game_id': game_id, 'response': self._round_summary(response_data), **kwargs},
        )

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       user_ip: Optional[str],
                       **kwargs):
        """Record a round transition such as ``round_won`` or ``round_given_up``."""
        self._write(logging.INFO, 'GAME_EVENT', event,
                    {'user_ip': user_ip or 'unknown', 'session_id': None},
                    {'game_id': game_id, **kwargs})

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        self._write(logging.ERROR, 'ERROR', action, get_user_identity(request), {
            'game_id': game_id,
            'exception': f"{type(error).__name__}: {error}",
        })

    @staticmethod
    def _round_summary(data: Any) -> Dict[str, Any]:
        """Reduce a response body to its flags and a short round summary."""
        if not isinstance(data, dict):
            return {'type': type(data).__name__}

        summary = {key: value for key, value in data.items() if key in ('success', 'error', 'reason', 'changed')}
        state = data.get('state')
        if isinstance(state, dict):
            summary['round'] = (
                f"{state.get('state')} {state.get('guess_count')}/{state.get('max_guesses')}, "
                f"{len(state.get('letter_knowledge') or {})} letters known"
            )
        return summary

    def get_log_stats(self) -> Dict[str, Any]:
        """Entry counts of today's log file per event type, for the health check."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        counts: Counter = Counter()
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    _, _, message = line.rstrip('\n').rpartition(' | ')
                    try:
                        counts[json.loads(message).get('event_type', 'OTHER')] += 1
                    except ValueError:
                        counts['OTHER'] += 1
        except OSError as e:
            return {'error': f'Failed to read log file: {e}'}

        return {
            'log_file': str(log_file),
            'size_kb': round(log_file.stat().st_size / 1024, 1),
            'total_entries': sum(counts.values()),
            'by_event_type': dict(counts),
        }


game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
