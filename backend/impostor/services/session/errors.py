"""Request-local failures raised by session operations.

None of these are fatal: the socket router turns them into a failed
acknowledgement and the HTTP blueprint into a JSON error response.
"""


class SessionError(Exception):
    code = 'SessionError'
    http_status = 400
    default_message = 'Session operation failed'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'error': self.message, 'code': self.code}


class InvalidInput(SessionError):
    code = 'InvalidInput'
    default_message = 'Invalid input'


class InvalidName(InvalidInput):
    code = 'InvalidName'
    default_message = 'A player name is required'


class MissingField(InvalidInput):
    code = 'MissingField'
    default_message = 'Name and word are required'


class DuplicateName(SessionError):
    code = 'DuplicateName'
    http_status = 409
    default_message = 'A player with that name is already in the game'


class PlayerNotFound(SessionError):
    code = 'PlayerNotFound'
    http_status = 404
    default_message = 'Player not found'


class WordAlreadyAssigned(SessionError):
    code = 'WordAlreadyAssigned'
    http_status = 409
    default_message = 'This player has already submitted a word'


class NotEnoughPlayers(SessionError):
    code = 'NotEnoughPlayers'
    default_message = 'At least 2 players are required to start'


class AlreadyStarted(SessionError):
    code = 'AlreadyStarted'
    http_status = 409
    default_message = 'The round has already started'


class NoWordsAvailable(SessionError):
    code = 'NoWordsAvailable'
    default_message = 'No player has submitted a word yet'


class EmptyWordPool(SessionError):
    code = 'EmptyWordPool'
    default_message = 'The automatic word pool is empty'


class NotStarted(SessionError):
    code = 'NotStarted'
    default_message = 'The round has not started yet'


class InvalidOrder(SessionError):
    code = 'InvalidOrder'
    default_message = 'The new order must contain exactly the current players'


class UnknownOperation(SessionError):
    code = 'UnknownOperation'
    http_status = 404
    default_message = 'Unknown operation'
