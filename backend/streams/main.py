from flask import Blueprint, jsonify, current_app
from streams.services.games import BOARD_SIZE, JOKER, SCORE_TABLE

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({
        'message': 'Welcome to the Streams game server!',
        'board_size': BOARD_SIZE,
        'joker': JOKER,
        'score_table': list(SCORE_TABLE),
        'total_rounds': current_app.config.get('TOTAL_ROUNDS', 20),
    })
