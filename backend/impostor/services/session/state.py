from dataclasses import dataclass, field
from typing import List, Optional

MODE_MANUAL = 'manual'
MODE_AUTOMATIC = 'automatic'
MODES = (MODE_MANUAL, MODE_AUTOMATIC)


@dataclass
class Player:
    id: int
    name: str
    word: Optional[str] = None

    @property
    def has_word(self) -> bool:
        return self.word is not None

    def to_dict(self):
        """Public view: never carries the word itself."""
        return {
            'id': self.id,
            'name': self.name,
            'hasWord': self.has_word,
        }


@dataclass
class SessionState:
    """The single mutable record of one game session.

    Holds data only; SessionOperations owns every mutation.
    """
    players: List[Player] = field(default_factory=list)
    words: List[str] = field(default_factory=list)
    mode: str = MODE_MANUAL
    word_pool: List[str] = field(default_factory=list)
    started: bool = False
    common_word: Optional[str] = None
    starter_player: Optional[str] = None
    impostor_name: Optional[str] = None
    next_player_id: int = 1

    def find_player(self, name: str) -> Optional[Player]:
        for player in self.players:
            if player.name == name:
                return player
        return None
