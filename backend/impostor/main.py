from flask import Blueprint, jsonify

from impostor import get_router

main = Blueprint('main', __name__)


@main.route('/')
def index():
    router = get_router()
    return jsonify({
        'message': 'Welcome to the Impostor game server!',
        'status': router.operations.get_status(),
        'connections': len(router.connections),
    })
