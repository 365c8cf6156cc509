# File: paperdrill_app/modules/auth/routes/api.py
from flask import jsonify, request

from paperdrill_app.core.error_handlers import AuthenticationError
from .. import auth_api_bp as blueprint
from ..services.auth_service import AuthService


@blueprint.route('/login', methods=['POST'])
def api_login():
    data = request.get_json(silent=True) or {}
    if not AuthService.login(data.get('password') if isinstance(data, dict) else None):
        raise AuthenticationError()
    return jsonify({'success': True})
