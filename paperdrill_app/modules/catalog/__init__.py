# File: paperdrill_app/modules/catalog/__init__.py
from flask import Blueprint

catalog_bp = Blueprint('catalog', __name__)
catalog_api_bp = Blueprint('catalog_api', __name__)

module_metadata = {
    'name': 'Article Catalog',
    'url_prefix': '/',
    'enabled': True
}

from . import routes  # noqa: E402,F401
