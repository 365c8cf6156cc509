# File: paperdrill_app/modules/auth/forms.py
from flask_wtf import FlaskForm
from wtforms import PasswordField, SubmitField
from wtforms.validators import DataRequired


class LoginForm(FlaskForm):
    """
    Shared password form.
    """
    password = PasswordField('Password', validators=[DataRequired(message="Please enter the password.")])
    submit = SubmitField('Enter')
