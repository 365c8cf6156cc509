# File: paperdrill_app/modules/reflection/routes/views.py
from flask import flash, redirect, url_for

from paperdrill_app.core.error_handlers import NotFoundError
from paperdrill_app.modules.catalog.logics.catalog_logic import apply_completion
from paperdrill_app.modules.exercise.logics.session_engine import Phase
from paperdrill_app.modules.exercise.services.workspace import get_workspace
from paperdrill_app.store import get_store
from .. import reflection_bp as blueprint
from ..forms import ReflectionForm
from ..schemas import Reflection
from ..services.reflection_service import ReflectionService


@blueprint.route('/<article_id>/finish', methods=['POST'])
def finish_article(article_id):
    """Submit the notes, then show the catalog snapshot with this article done."""
    workspace = get_workspace()
    session = workspace.exercise
    if session is None or session.article_id != article_id or session.phase is not Phase.COMPLETED:
        flash('Finish every sentence before saving notes.', 'warning')
        return redirect(url_for('exercise.exercise_page', article_id=article_id))

    form = ReflectionForm()
    if not form.validate_on_submit():
        return redirect(url_for('exercise.exercise_page', article_id=article_id))

    article = workspace.article
    try:
        ReflectionService.submit_reflection(
            get_store(),
            article.id,
            article.title,
            Reflection.from_mapping(form.data),
            article.stats.to_dict() if article.stats else None,
        )
    except NotFoundError:
        flash('This article no longer exists in the store.', 'danger')
        return redirect(url_for('exercise.exercise_page', article_id=article_id))

    workspace.clear_exercise()
    flash('Saved. Nice work!', 'success')
    if workspace.catalog is not None:
        workspace.catalog = apply_completion(workspace.catalog, article_id)
        return redirect(url_for('catalog.index', snapshot=1))
    return redirect(url_for('catalog.index'))
