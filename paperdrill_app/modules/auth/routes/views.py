# File: paperdrill_app/modules/auth/routes/views.py
from flask import flash, redirect, render_template, url_for

from paperdrill_app.modules.exercise.services.workspace import drop_workspace
from .. import auth_bp as blueprint
from ..forms import LoginForm
from ..services.auth_service import AuthService


@blueprint.route('/login', methods=['GET', 'POST'])
def login():
    form = LoginForm()
    if form.validate_on_submit():
        if AuthService.login(form.password.data):
            return redirect(url_for('catalog.index'))
        flash('Wrong password.', 'danger')
        return redirect(url_for('auth.login'))

    return render_template('login.html', form=form)


@blueprint.route('/logout', methods=['POST'])
def logout():
    drop_workspace()
    AuthService.logout()
    return redirect(url_for('auth.login'))
