# File: paperdrill_app/modules/reflection/__init__.py
from flask import Blueprint

reflection_bp = Blueprint('reflection', __name__)
reflection_api_bp = Blueprint('reflection_api', __name__)

module_metadata = {
    'name': 'Reflection',
    'url_prefix': '/exercise',
    'enabled': True
}

from . import routes  # noqa: E402,F401
