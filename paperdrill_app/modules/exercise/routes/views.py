# File: paperdrill_app/modules/exercise/routes/views.py
from flask import flash, redirect, render_template, url_for

from paperdrill_app.core.error_handlers import InvalidTransitionError, NotFoundError
from paperdrill_app.modules.reflection.forms import ReflectionForm
from paperdrill_app.modules.reflection.logics.summary_logic import summarize
from .. import exercise_bp as blueprint
from ..logics.session_engine import Phase, session_view
from ..services.exercise_service import ExerciseService
from ..services.workspace import get_workspace


@blueprint.route('/<article_id>', methods=['GET'])
def exercise_page(article_id):
    """Game screen; once every sentence is done it becomes the reflection form."""
    workspace = get_workspace()
    try:
        session = ExerciseService.open(article_id, workspace)
    except (InvalidTransitionError, NotFoundError) as e:
        flash(e.message, 'warning')
        return redirect(url_for('catalog.index'))

    summary = None
    form = None
    if session.phase is Phase.COMPLETED:
        summary = summarize(workspace.article)
        form = ReflectionForm()

    return render_template(
        'exercise.html',
        article=workspace.article,
        state=session_view(session),
        summary=summary,
        form=form,
    )


@blueprint.route('/<article_id>/exit', methods=['POST'])
def exit_exercise(article_id):
    ExerciseService.exit()
    return redirect(url_for('catalog.index'))
