# File: paperdrill_app/modules/exercise/__init__.py
from flask import Blueprint

exercise_bp = Blueprint('exercise', __name__)
exercise_api_bp = Blueprint('exercise_api', __name__)

module_metadata = {
    'name': 'Sentence Reconstruction',
    'url_prefix': '/exercise',
    'enabled': True
}

from . import routes  # noqa: E402,F401
