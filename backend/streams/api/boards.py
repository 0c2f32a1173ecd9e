from flask import Blueprint, jsonify, request, current_app
from streams.services.games import (
    BoardContractError,
    final_ranking,
    groups,
    is_board_full,
    is_game_over,
    restore_board,
    score,
)


boards = Blueprint('boards', __name__)


def board_payload(raw) -> dict:
    """Normalize a stored board and attach its score and color groups."""
    board = restore_board(raw)
    total = score(board)
    group_map = groups(board)
    filled = sum(1 for cell in board if cell is not None)
    current_app.logger.info(f"[score] filled={filled} score={total} groups={len(set(group_map.values()))}")
    return {
        'board': board,
        'score': total,
        # JSON object keys are strings; index -> group id
        'groups': {str(index): group_id for index, group_id in group_map.items()},
        'full': is_board_full(board),
    }


@boards.errorhandler(BoardContractError)
def handle_board_contract_error(exc):
    current_app.logger.warning(f"[board-rejected] {exc}")
    return jsonify({'error': str(exc)}), 400


@boards.route('/score', methods=['POST'])
def score_board():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'board' not in data:
        return jsonify({'error': 'board is required'}), 400
    return jsonify(board_payload(data['board']))


@boards.route('/standings', methods=['POST'])
def standings():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'request body must be a JSON object'}), 400
    teams = data.get('teams')
    if not isinstance(teams, list) or not all(isinstance(t, dict) for t in teams):
        return jsonify({'error': 'teams must be a list of objects'}), 400
    current_round = data.get('current_round')
    if current_round is None:
        current_round = 0
    if not isinstance(current_round, int) or isinstance(current_round, bool):
        return jsonify({'error': 'current_round must be an integer'}), 400

    total_rounds = int(current_app.config.get('TOTAL_ROUNDS', 20))
    ranking = final_ranking(teams)
    # Only teams with players take part in the end-of-game board check
    active_boards = [t.get('board') for t in teams if isinstance(t.get('players'), list) and t.get('players')]
    game_over = is_game_over(current_round, active_boards, total_rounds=total_rounds)
    current_app.logger.info(
        f"[standings] teams={len(ranking)} round={current_round}/{total_rounds} game_over={game_over}"
    )
    return jsonify({'ranking': ranking, 'game_over': game_over})
