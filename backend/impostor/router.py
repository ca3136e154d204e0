"""Connection router: maps named requests onto session operations.

Each request is handled to completion (validation, mutation, broadcast)
under one lock before the next one starts, whichever transport carried it.
The caller gets the result fields back; everybody else learns about the
change through the broadcaster.
"""

import logging
import threading
from typing import Dict, Optional

from .services.session.errors import SessionError, UnknownOperation

logger = logging.getLogger(__name__)

RESET_MESSAGE = 'Game reset'
RESET_WORDS_MESSAGE = 'Words removed, round reset'
STARTED_MESSAGE = 'Round started'


def _field(payload, key):
    # Name-only requests may send the bare string instead of an object
    if isinstance(payload, dict):
        return payload.get(key)
    return payload


class ConnectionRouter:

    def __init__(self, operations, broadcaster, remove_on_disconnect: bool = False):
        self.operations = operations
        self.broadcaster = broadcaster
        self.remove_on_disconnect = remove_on_disconnect
        # sid -> name the connection joined as (None until it joins)
        self.connections: Dict[str, Optional[str]] = {}
        self._lock = threading.RLock()
        self._handlers = {
            'join': self._join,
            'leave': self._leave,
            'addWord': self._add_word,
            'getPlayers': self._get_players,
            'startGame': self._start_game,
            'reorderPlayers': self._reorder_players,
            'getSettings': self._get_settings,
            'updateSettings': self._update_settings,
            'resetGame': self._reset_game,
            'resetWords': self._reset_words,
            'getPlayerState': self._get_player_state,
            'getGameStatus': self._get_game_status,
        }

    @property
    def operation_names(self):
        return tuple(self._handlers)

    def dispatch(self, operation: str, payload=None, sid: Optional[str] = None) -> Dict:
        """Run one operation and its broadcast; raises SessionError on failure."""
        handler = self._handlers.get(operation)
        if handler is None:
            raise UnknownOperation(f'Unknown operation: {operation}')
        with self._lock:
            return handler(payload, sid)

    def acknowledge(self, operation: str, payload=None, sid: Optional[str] = None) -> Dict:
        """Run an operation and wrap the outcome in the acknowledgement envelope."""
        try:
            result = self.dispatch(operation, payload, sid)
        except SessionError as exc:
            logger.info(f"[reject] op={operation} code={exc.code} error={exc.message}")
            return {'success': False, 'error': exc.message}
        except Exception:
            logger.exception(f"[error] op={operation} sid={sid}")
            return {'success': False, 'error': 'Internal server error'}
        response = {'success': True}
        response.update(result)
        return response

    # ---- connection registry ----

    def connect(self, sid: str) -> None:
        with self._lock:
            self.connections[sid] = None
        logger.debug(f"[connect] sid={sid} connections={len(self.connections)}")

    def disconnect(self, sid: str) -> None:
        with self._lock:
            name = self.connections.pop(sid, None)
            logger.debug(f"[disconnect] sid={sid} name={name} connections={len(self.connections)}")
            if name and self.remove_on_disconnect:
                if self.operations.remove_player(name):
                    self.broadcaster.players_updated(self.operations.get_players())

    def _bind(self, sid, name) -> None:
        if sid is not None:
            self.connections[sid] = name

    def _unbind(self, name) -> None:
        for sid, bound in self.connections.items():
            if bound == name:
                self.connections[sid] = None

    # ---- operations ----

    def _join(self, payload, sid):
        player = self.operations.add_player(_field(payload, 'name'))
        self._bind(sid, player.name)
        self.broadcaster.players_updated(self.operations.get_players())
        return {'player': player.to_dict()}

    def _leave(self, payload, sid):
        name = _field(payload, 'name')
        removed = self.operations.remove_player(name)
        if removed:
            self._unbind(name.strip())
            self.broadcaster.players_updated(self.operations.get_players())
        return {'removed': removed}

    def _add_word(self, payload, sid):
        payload = payload if isinstance(payload, dict) else {}
        word = self.operations.add_word(payload.get('name'), payload.get('word'))
        self.broadcaster.players_updated(self.operations.get_players())
        return {'word': word}

    def _get_players(self, payload, sid):
        return {'players': self.operations.get_players()}

    def _start_game(self, payload, sid):
        summary = self.operations.start_game()
        self.broadcaster.game_started(summary)
        result = {'message': STARTED_MESSAGE}
        result.update(summary.to_public_dict())
        return {'result': result}

    def _reorder_players(self, payload, sid):
        order = payload.get('order') if isinstance(payload, dict) else payload
        players = self.operations.reorder_players(order)
        self.broadcaster.players_updated(players)
        return {'players': players}

    def _get_settings(self, payload, sid):
        return {'settings': self.operations.get_settings()}

    def _update_settings(self, payload, sid):
        settings = self.operations.set_settings(payload)
        self.broadcaster.settings_updated(settings)
        return {'settings': settings}

    def _reset_game(self, payload, sid):
        self.operations.reset()
        for bound_sid in self.connections:
            self.connections[bound_sid] = None
        self.broadcaster.game_reset(RESET_MESSAGE, self.operations.get_players())
        return {'message': RESET_MESSAGE}

    def _reset_words(self, payload, sid):
        self.operations.remove_words()
        self.broadcaster.game_reset(RESET_WORDS_MESSAGE, self.operations.get_players())
        return {'message': RESET_WORDS_MESSAGE}

    def _get_player_state(self, payload, sid):
        return {'state': self.operations.get_player_state(_field(payload, 'name'))}

    def _get_game_status(self, payload, sid):
        return self.operations.get_status()
