import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .errors import (
    AlreadyStarted,
    DuplicateName,
    EmptyWordPool,
    InvalidInput,
    InvalidName,
    InvalidOrder,
    MissingField,
    NoWordsAvailable,
    NotEnoughPlayers,
    NotStarted,
    PlayerNotFound,
    WordAlreadyAssigned,
)
from .state import MODE_AUTOMATIC, MODE_MANUAL, MODES, Player, SessionState
from .word_pool import load_word_pool

logger = logging.getLogger(__name__)

ROLE_IMPOSTOR = 'impostor'
ROLE_PLAYER = 'player'


def _clean(value) -> str:
    if not isinstance(value, str):
        return ''
    return value.strip()


@dataclass(frozen=True)
class RoundSummary:
    starter_player: str
    common_word: str
    total_players: int
    impostor_name: str

    def to_public_dict(self):
        """Round summary as delivered to clients; the impostor is withheld."""
        return {
            'starterPlayer': self.starter_player,
            'commonWord': self.common_word,
            'totalPlayers': self.total_players,
        }


class SessionOperations:
    """State transitions for one session.

    Every operation validates first and only then writes to the state, so a
    raised SessionError always leaves the state exactly as it was.
    """

    def __init__(
        self,
        state: SessionState,
        word_source: Optional[Callable[[], List[str]]] = None,
        rng: Optional[random.Random] = None,
        min_players: int = 2,
        default_mode: str = MODE_MANUAL,
    ):
        self.state = state
        self.word_source = word_source or (lambda: [])
        self.rng = rng or random.Random()
        self.min_players = max(2, int(min_players))
        self.default_mode = default_mode if default_mode in MODES else MODE_MANUAL
        self.state.mode = self.default_mode
        self.state.word_pool = list(self.word_source())

    @classmethod
    def from_word_file(cls, state: SessionState, path: Optional[str], **kwargs):
        return cls(state, word_source=lambda: load_word_pool(path), **kwargs)

    # ---- roster ----

    def add_player(self, name) -> Player:
        name = _clean(name)
        if not name:
            raise InvalidName()
        if self.state.find_player(name):
            raise DuplicateName()
        player = Player(id=self.state.next_player_id, name=name)
        self.state.next_player_id += 1
        self.state.players.append(player)
        logger.info(f"[join] name={name} id={player.id} players={len(self.state.players)}")
        return player

    def remove_player(self, name) -> bool:
        player = self.state.find_player(_clean(name))
        if not player:
            return False
        self.state.players.remove(player)
        if player.word is not None and player.word in self.state.words:
            self.state.words.remove(player.word)
        logger.info(f"[leave] name={player.name} players={len(self.state.players)}")
        return True

    def get_players(self) -> List[Dict]:
        return [p.to_dict() for p in self.state.players]

    def reorder_players(self, ordered_names) -> List[Dict]:
        if not isinstance(ordered_names, (list, tuple)):
            raise InvalidOrder()
        names = [_clean(n) for n in ordered_names]
        current = self.state.players
        if len(names) != len(current) or set(names) != {p.name for p in current}:
            raise InvalidOrder()
        by_name = {p.name: p for p in current}
        self.state.players = [by_name[n] for n in names]
        logger.info(f"[reorder] order={names}")
        return self.get_players()

    # ---- words ----

    def add_word(self, name, word) -> str:
        name, word = _clean(name), _clean(word)
        if not name or not word:
            raise MissingField()
        player = self.state.find_player(name)
        if not player:
            raise PlayerNotFound()
        if player.word is not None:
            raise WordAlreadyAssigned()
        player.word = word
        self.state.words.append(word)
        logger.info(f"[word] name={name} words={len(self.state.words)}")
        return word

    # ---- round ----

    def start_game(self) -> RoundSummary:
        state = self.state
        if len(state.players) < self.min_players:
            raise NotEnoughPlayers(f'At least {self.min_players} players are required to start')
        if state.started:
            raise AlreadyStarted()
        if state.mode == MODE_AUTOMATIC:
            candidates = list(state.word_pool)
            if not candidates:
                raise EmptyWordPool()
        else:
            candidates = [p.word for p in state.players if p.word is not None]
            if not candidates:
                raise NoWordsAvailable()

        # Independent draws; the starter may also be the impostor
        common_word = candidates[self.rng.randrange(len(candidates))]
        starter = state.players[self.rng.randrange(len(state.players))].name
        impostor = state.players[self.rng.randrange(len(state.players))].name

        state.common_word = common_word
        state.starter_player = starter
        state.impostor_name = impostor
        state.started = True
        logger.info(f"[start] mode={state.mode} players={len(state.players)} starter={starter}")
        logger.debug(f"[start] impostor={impostor}")
        return RoundSummary(
            starter_player=starter,
            common_word=common_word,
            total_players=len(state.players),
            impostor_name=impostor,
        )

    def get_player_state(self, name) -> Dict:
        if not self.state.started:
            raise NotStarted()
        player = self.state.find_player(_clean(name))
        if not player:
            raise PlayerNotFound()
        if player.name == self.state.impostor_name:
            return {'role': ROLE_IMPOSTOR}
        return {'role': ROLE_PLAYER, 'word': self.state.common_word}

    def remove_words(self) -> None:
        state = self.state
        state.common_word = None
        state.starter_player = None
        state.impostor_name = None
        state.words = []
        state.started = False
        for player in state.players:
            player.word = None
        logger.info(f"[reset-words] players={len(state.players)}")

    def reset(self) -> None:
        # Load before touching the state so a new pool is complete when it goes live
        pool = list(self.word_source())
        state = self.state
        state.players = []
        state.words = []
        state.mode = self.default_mode
        state.word_pool = pool
        state.started = False
        state.common_word = None
        state.starter_player = None
        state.impostor_name = None
        state.next_player_id = 1
        logger.info(f"[reset] pool={len(pool)}")

    # ---- settings & status ----

    def get_settings(self) -> Dict:
        return {'mode': self.state.mode}

    def set_settings(self, settings) -> Dict:
        if isinstance(settings, dict) and 'mode' in settings:
            mode = settings['mode']
            if mode not in MODES:
                raise InvalidInput(f"Unknown mode: {mode!r} (expected one of {', '.join(MODES)})")
            self.state.mode = mode
            logger.info(f"[settings] mode={mode}")
        return self.get_settings()

    def get_status(self) -> Dict:
        state = self.state
        return {
            'started': state.started,
            'playerCount': len(state.players),
            'wordsCount': len(state.words),
            'hasCommonWord': state.common_word is not None,
            'starterPlayer': state.starter_player,
            'mode': state.mode,
        }
