# File: paperdrill_app/modules/auth/__init__.py
from flask import Blueprint

auth_bp = Blueprint('auth', __name__)
auth_api_bp = Blueprint('auth_api', __name__)

module_metadata = {
    'name': 'Shared password',
    'url_prefix': '/login',
    'enabled': True
}

from . import routes  # noqa: E402,F401
