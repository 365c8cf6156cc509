# File: paperdrill_app/modules/exercise/routes/api.py
from flask import jsonify, request
from flask_login import current_user

from paperdrill_app.core.error_handlers import AuthenticationError, ValidationError
from .. import exercise_api_bp as blueprint
from ..logics.session_engine import session_view
from ..services.exercise_service import ExerciseService


@blueprint.before_request
def require_learner():
    """Exercises live in the learner's workspace; anonymous callers get 401."""
    if not current_user.is_authenticated:
        raise AuthenticationError('Login required')


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _int_field(data: dict, name: str) -> int:
    value = data.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"'{name}' must be an integer", errors={name: value})
    return value


def _str_field(data: dict, name: str) -> str:
    value = data.get(name)
    if not isinstance(value, str) or not value:
        raise ValidationError(f"'{name}' is required", errors={name: value})
    return value


@blueprint.route('/start/<article_id>', methods=['POST'])
def start_exercise(article_id):
    session = ExerciseService.open(article_id)
    return jsonify(session_view(session))


@blueprint.route('/state', methods=['GET'])
def exercise_state():
    return jsonify(session_view(ExerciseService.current()))


@blueprint.route('/place', methods=['POST'])
def place_tile():
    data = _json_body()
    word = data.get('word')
    session = ExerciseService.apply(
        'place',
        pool_index=_int_field(data, 'poolIndex'),
        word=word if isinstance(word, str) else None,
    )
    return jsonify(session_view(session))


@blueprint.route('/remove', methods=['POST'])
def remove_tile():
    session = ExerciseService.apply('remove', tile_id=_str_field(_json_body(), 'tileId'))
    return jsonify(session_view(session))


@blueprint.route('/reorder', methods=['POST'])
def reorder_tile():
    data = _json_body()
    session = ExerciseService.apply(
        'reorder',
        tile_id=_str_field(data, 'tileId'),
        position=_int_field(data, 'position'),
    )
    return jsonify(session_view(session))


@blueprint.route('/<action>', methods=['POST'])
def simple_transition(action):
    """check / retry / reveal / hide / advance / skip take no parameters."""
    if action not in ('check', 'retry', 'reveal', 'hide', 'advance', 'skip'):
        raise ValidationError(f"Unknown action '{action}'")
    session = ExerciseService.apply(action)
    return jsonify(session_view(session))


@blueprint.route('/exit', methods=['POST'])
def exit_exercise():
    ExerciseService.exit()
    return jsonify({'success': True})
