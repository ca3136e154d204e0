from flask import Flask, current_app
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import get_config

EXTENSION_KEY = 'impostor'

socketio = SocketIO(async_mode=None)


def get_router():
    """Connection router of the current app (one session per app)."""
    return current_app.extensions[EXTENSION_KEY]


def create_app(config_class=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class or get_config())
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('ALLOWED_ORIGINS') or []
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One session per app, built here and handed to everything that needs it
    from impostor.broadcast import Broadcaster
    from impostor.router import ConnectionRouter
    from impostor.services.session import SessionOperations, SessionState

    operations = SessionOperations.from_word_file(
        SessionState(),
        flask_app.config.get('WORDS_FILE'),
        min_players=flask_app.config.get('MIN_PLAYERS', 2),
        default_mode=flask_app.config.get('DEFAULT_MODE', 'manual'),
    )
    router = ConnectionRouter(
        operations,
        Broadcaster(socketio, namespace=namespace),
        remove_on_disconnect=flask_app.config.get('REMOVE_ON_DISCONNECT', False),
    )
    flask_app.extensions[EXTENSION_KEY] = router
    flask_app.logger.info(
        f"[init] mode={operations.state.mode} pool={len(operations.state.word_pool)} namespace={namespace}"
    )

    # Import and register blueprints here
    from impostor.main import main
    flask_app.register_blueprint(main)

    from impostor.api.session import session_api
    flask_app.register_blueprint(session_api, url_prefix='/api/session')

    # Register Socket.IO event handlers
    # Importing here ensures the handlers bind to the initialized socketio instance
    from impostor.socketio_events import register_socketio_handlers
    register_socketio_handlers(router, namespace=namespace)

    @click.command('words')
    @click.option('--sample', default=5, show_default=True, help='How many words to print.')
    def words_command(sample):
        """Loads the configured word file and shows what automatic mode would draw from."""
        from impostor.services.session import load_word_pool
        path = flask_app.config.get('WORDS_FILE')
        pool = load_word_pool(path)
        click.echo(f'{len(pool)} words in {path}')
        for word in pool[:sample]:
            click.echo(f'  {word}')

    flask_app.cli.add_command(words_command)

    return flask_app
