from flask import request
from flask_socketio import emit

from impostor import socketio, get_router


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    router = get_router()
    router.connect(_get_sid())
    emit('connected', {
        'message': 'Connected to the game session',
        'players': router.operations.get_players(),
        'settings': router.operations.get_settings(),
    })


def handle_disconnect(*args):
    # Without REMOVE_ON_DISCONNECT the roster entry stays until an explicit
    # leave or a full reset
    get_router().disconnect(_get_sid())


def _make_handler(operation: str):
    def handler(data=None):
        # The return value becomes the acknowledgement; if the client did not
        # ask for one it is dropped, while the broadcast still goes out
        return get_router().acknowledge(operation, data, sid=_get_sid())

    handler.__name__ = f'handle_{operation}'
    return handler


def register_socketio_handlers(router, namespace: str = '/') -> None:
    """Register Socket.IO event handlers.

    One handler per router operation, each named after the operation, plus
    connect/disconnect bookkeeping for the connection registry.
    """
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    for operation in router.operation_names:
        socketio.on_event(operation, _make_handler(operation), namespace=namespace)
