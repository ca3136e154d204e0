import pytest

from impostor.broadcast import Broadcaster
from impostor.router import ConnectionRouter
from impostor.services.session.errors import UnknownOperation


class RecordingSocketIO:
    def __init__(self):
        self.sent = []

    def emit(self, event, payload, namespace=None):
        self.sent.append((event, payload))


class BrokenSocketIO:
    def emit(self, event, payload, namespace=None):
        raise ConnectionError('transport down')


@pytest.fixture()
def sink():
    return RecordingSocketIO()


@pytest.fixture()
def router(ops, sink):
    return ConnectionRouter(ops, Broadcaster(sink))


def test_ack_envelope(router):
    assert router.acknowledge('join', 'Alice') == {
        'success': True,
        'player': {'id': 1, 'name': 'Alice', 'hasWord': False},
    }
    assert router.acknowledge('join', 'Alice') == {
        'success': False,
        'error': 'A player with that name is already in the game',
    }


def test_unknown_operation(router):
    with pytest.raises(UnknownOperation):
        router.dispatch('teleport')
    assert router.acknowledge('teleport')['success'] is False


def test_unexpected_error_becomes_failed_ack(router, monkeypatch):
    def boom():
        raise RuntimeError('boom')

    monkeypatch.setattr(router.operations, 'get_players', boom)
    assert router.acknowledge('getPlayers') == {'success': False, 'error': 'Internal server error'}


def test_game_started_event_omits_impostor(router, sink):
    router.dispatch('join', 'Alice')
    router.dispatch('join', 'Bob')
    router.dispatch('addWord', {'name': 'Bob', 'word': 'pizza'})
    sink.sent.clear()
    router.dispatch('startGame')
    assert [event for event, _ in sink.sent] == ['gameStarted']
    impostor = router.operations.state.impostor_name
    payload = sink.sent[0][1]
    assert 'impostorName' not in payload
    assert impostor not in payload.values() or impostor == payload['starterPlayer']


def test_broadcast_failure_does_not_fail_operation(ops):
    router = ConnectionRouter(ops, Broadcaster(BrokenSocketIO()))
    ack = router.acknowledge('join', 'Alice')
    assert ack['success'] is True
    assert [p['name'] for p in ops.get_players()] == ['Alice']


def test_connection_registry(ops, sink):
    router = ConnectionRouter(ops, Broadcaster(sink), remove_on_disconnect=True)
    router.connect('sid-1')
    router.connect('sid-2')
    router.dispatch('join', 'Alice', sid='sid-1')
    assert router.connections == {'sid-1': 'Alice', 'sid-2': None}

    # After a full reset the binding is gone, so a newcomer named Alice survives
    router.dispatch('resetGame')
    router.dispatch('join', 'Alice', sid='sid-2')
    sink.sent.clear()
    router.disconnect('sid-1')
    assert [p['name'] for p in ops.get_players()] == ['Alice']
    assert sink.sent == []

    router.disconnect('sid-2')
    assert ops.get_players() == []
    assert sink.sent == [('playersUpdated', [])]
