# File: paperdrill_app/modules/catalog/routes/views.py
from flask import render_template, request

from paperdrill_app.modules.exercise.services.workspace import get_workspace
from paperdrill_app.store import get_store
from .. import catalog_bp as blueprint
from ..logics.catalog_logic import pending_articles, playable_articles
from ..services.catalog_service import CatalogService


@blueprint.route('/', methods=['GET'])
def index():
    """
    Article list. ``?snapshot=1`` (used right after a completion) renders the
    in-memory catalog with the completion applied instead of re-reading the store.
    """
    workspace = get_workspace()
    if request.args.get('snapshot') and workspace.catalog is not None:
        catalog = workspace.catalog
    else:
        catalog = CatalogService.load_catalog(get_store())
        workspace.catalog = catalog

    return render_template(
        'catalog.html',
        catalog=catalog,
        playable=playable_articles(catalog.articles),
        pending=pending_articles(catalog.articles),
        done=[a for a in catalog.articles if a.is_done],
        daily_stats=catalog.daily_stats,
    )
