from flask import Blueprint, jsonify, request

from impostor import get_router
from impostor.services.session.errors import SessionError

session_api = Blueprint('session_api', __name__)


@session_api.errorhandler(SessionError)
def handle_session_error(exc):
    return jsonify(exc.to_dict()), exc.http_status


def _payload():
    return request.get_json(silent=True) or {}


@session_api.route('/join', methods=['POST'])
def join():
    result = get_router().dispatch('join', _payload())
    return jsonify(result['player']), 201


@session_api.route('/leave', methods=['POST'])
def leave():
    result = get_router().dispatch('leave', _payload())
    return jsonify(result)


@session_api.route('/words', methods=['POST'])
def add_word():
    result = get_router().dispatch('addWord', _payload())
    return jsonify(result), 201


@session_api.route('/players', methods=['GET'])
def players():
    return jsonify(get_router().dispatch('getPlayers')['players'])


@session_api.route('/start', methods=['POST'])
def start_game():
    result = get_router().dispatch('startGame')
    return jsonify(result['result'])


@session_api.route('/state/<string:name>', methods=['GET'])
def player_state(name):
    result = get_router().dispatch('getPlayerState', name)
    return jsonify(result['state'])


@session_api.route('/reorder', methods=['POST'])
def reorder_players():
    result = get_router().dispatch('reorderPlayers', _payload())
    return jsonify(result['players'])


@session_api.route('/settings', methods=['GET'])
def get_settings():
    return jsonify(get_router().dispatch('getSettings')['settings'])


@session_api.route('/settings', methods=['PUT'])
def update_settings():
    result = get_router().dispatch('updateSettings', _payload())
    return jsonify(result['settings'])


@session_api.route('/reset', methods=['POST'])
def reset_game():
    return jsonify(get_router().dispatch('resetGame'))


@session_api.route('/reset-words', methods=['POST'])
def reset_words():
    return jsonify(get_router().dispatch('resetWords'))


@session_api.route('/status', methods=['GET'])
def status():
    return jsonify(get_router().dispatch('getGameStatus'))
