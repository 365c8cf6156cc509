# File: paperdrill_app/modules/reflection/forms.py
from flask_wtf import FlaskForm
from wtforms import SubmitField, TextAreaField
from wtforms.validators import Optional


class ReflectionForm(FlaskForm):
    """
    Notes written after the last sentence. All fields are optional.
    """
    purpose = TextAreaField('Purpose', validators=[Optional()],
                            render_kw={'placeholder': 'What was this study trying to find out?'})
    methods = TextAreaField('Methods', validators=[Optional()],
                            render_kw={'placeholder': 'How did they go about it?'})
    results = TextAreaField('Results', validators=[Optional()],
                            render_kw={'placeholder': 'What did they find?'})
    memo = TextAreaField('Memo / Questions', validators=[Optional()],
                         render_kw={'placeholder': 'Anything that stood out'})
    submit = SubmitField('Save and finish')
