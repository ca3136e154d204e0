import os
import sys
import random
import pytest

# Ensure the backend root (containing the `impostor` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from impostor import create_app, socketio
from impostor.services.session import SessionOperations, SessionState


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    WORDS_FILE = os.path.join(BACKEND_ROOT, 'impostor', 'data', 'words.txt')
    DEFAULT_MODE = 'manual'
    MIN_PLAYERS = 2
    REMOVE_ON_DISCONNECT = False
    SOCKETIO_NAMESPACE = '/'
    ALLOWED_ORIGINS = ['http://localhost:3000']
    LOG_LEVEL = 'ERROR'


@pytest.fixture()
def ops():
    """Session operations over a fresh state with a seeded RNG and a small pool."""
    return SessionOperations(
        SessionState(),
        word_source=lambda: ['apple', 'river', 'castle'],
        rng=random.Random(1234),
    )


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/')
    except Exception:
        pass


@pytest.fixture()
def make_sio_client(flask_app):
    """Factory for extra connected clients, disconnected on teardown."""
    clients = []

    def _make():
        c = socketio.test_client(flask_app, namespace='/')
        clients.append(c)
        return c

    yield _make
    for c in clients:
        try:
            c.disconnect(namespace='/')
        except Exception:
            pass
