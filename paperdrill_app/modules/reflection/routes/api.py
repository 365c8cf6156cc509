# File: paperdrill_app/modules/reflection/routes/api.py
from flask import jsonify, request

from paperdrill_app.core.error_handlers import ValidationError
from paperdrill_app.store import get_store
from .. import reflection_api_bp as blueprint
from ..schemas import Reflection
from ..services.reflection_service import ReflectionService


@blueprint.route('/articles', methods=['POST'])
def submit_reflection():
    """Body: {id, title, purpose, methods, results, memo, stats}."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Expected a JSON object')
    article_id = data.get('id')
    if not isinstance(article_id, str) or not article_id:
        raise ValidationError("'id' is required", errors={'id': article_id})
    stats = data.get('stats')

    ReflectionService.submit_reflection(
        get_store(),
        article_id,
        str(data.get('title') or ''),
        Reflection.from_mapping(data),
        stats if isinstance(stats, dict) else None,
    )
    return jsonify({'success': True})
