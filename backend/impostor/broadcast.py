import logging
from typing import Dict, List

logger = logging.getLogger(__name__)

PLAYERS_UPDATED = 'playersUpdated'
GAME_STARTED = 'gameStarted'
GAME_RESET = 'gameReset'
SETTINGS_UPDATED = 'settingsUpdated'


class Broadcaster:
    """Fans session events out to every client on the namespace.

    Payloads are built from public views only, so the impostor's name has
    no path into an event body. Emits are fire-and-forget: a failed emit is
    logged and never reaches the operation that triggered it.
    """

    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def _emit(self, event: str, payload) -> None:
        try:
            self.socketio.emit(event, payload, namespace=self.namespace)
        except Exception as exc:
            logger.warning(f"[broadcast-fail] event={event} error={exc}")

    def players_updated(self, players: List[Dict]) -> None:
        self._emit(PLAYERS_UPDATED, players)

    def game_started(self, summary) -> None:
        payload = {'message': 'Round started'}
        payload.update(summary.to_public_dict())
        self._emit(GAME_STARTED, payload)

    def game_reset(self, message: str, players: List[Dict]) -> None:
        self._emit(GAME_RESET, {'message': message})
        self.players_updated(players)

    def settings_updated(self, settings: Dict) -> None:
        self._emit(SETTINGS_UPDATED, dict(settings))
