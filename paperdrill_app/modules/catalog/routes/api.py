# File: paperdrill_app/modules/catalog/routes/api.py
from flask import jsonify
from flask_login import current_user

from paperdrill_app.modules.exercise.services.workspace import get_workspace
from paperdrill_app.store import get_store
from .. import catalog_api_bp as blueprint
from ..services.catalog_service import CatalogService


@blueprint.route('/articles', methods=['GET'])
def list_articles():
    """All articles plus today's aggregate stats, read fresh from the store."""
    catalog = CatalogService.load_catalog(get_store())
    # Anonymous callers get the data but no workspace
    if current_user.is_authenticated:
        get_workspace().catalog = catalog
    return jsonify(catalog.to_dict())
