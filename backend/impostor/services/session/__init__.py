"""Session domain services: state, operations, errors and the word source.

This package contains pure(ish) domain logic that should be imported by
HTTP routes and socket handlers, keeping transport concerns separated
from core game mechanics.
"""

from .errors import SessionError
from .operations import RoundSummary, SessionOperations
from .state import MODE_AUTOMATIC, MODE_MANUAL, MODES, Player, SessionState
from .word_pool import load_word_pool

__all__ = [
    'SessionError',
    'RoundSummary',
    'SessionOperations',
    'MODE_AUTOMATIC',
    'MODE_MANUAL',
    'MODES',
    'Player',
    'SessionState',
    'load_word_pool',
]
