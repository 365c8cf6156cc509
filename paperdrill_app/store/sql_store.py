# File: paperdrill_app/store/sql_store.py
"""SQLAlchemy-backed record store mirroring the spreadsheet layout."""

from __future__ import annotations

import logging
from typing import List, Mapping

from sqlalchemy.exc import SQLAlchemyError

from ..core.error_handlers import RowNotFoundError, StoreError
from ..core.extensions import db
from .base import ARTICLES_TABLE, LOG_TABLE, RecordStore, Row, cell, check_table

logger = logging.getLogger(__name__)


class ArticleRecord(db.Model):
    """One row of the Articles sheet; ``row_id`` keeps the sheet order."""
    __tablename__ = 'articles'

    row_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    id = db.Column(db.String(128), nullable=False, unique=True, index=True)
    title = db.Column(db.Text, nullable=False, default='')
    tags = db.Column(db.Text, nullable=False, default='')
    status = db.Column(db.String(16), nullable=False, default='')
    purpose = db.Column(db.Text, nullable=False, default='')
    methods = db.Column(db.Text, nullable=False, default='')
    results = db.Column(db.Text, nullable=False, default='')
    memo = db.Column(db.Text, nullable=False, default='')
    stats = db.Column(db.Text, nullable=False, default='')
    game_data = db.Column(db.Text, nullable=False, default='')


class LogRecord(db.Model):
    """One row of the completion ledger sheet."""
    __tablename__ = 'log'

    row_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    date = db.Column(db.String(10), nullable=False, index=True)
    article_id = db.Column(db.String(128), nullable=False, default='')
    title = db.Column(db.Text, nullable=False, default='')
    count_sentences = db.Column(db.String(16), nullable=False, default='')
    count_words = db.Column(db.String(16), nullable=False, default='')


_MODELS = {
    ARTICLES_TABLE: ArticleRecord,
    LOG_TABLE: LogRecord,
}


class SqlRecordStore(RecordStore):
    """Record store on the application's SQLAlchemy session."""

    def _model(self, table: str):
        check_table(table)
        return _MODELS[table]

    @staticmethod
    def _to_row(record, columns) -> Row:
        return {column: cell(getattr(record, column)) for column in columns}

    def list_rows(self, table: str) -> List[Row]:
        columns = check_table(table)
        model = self._model(table)
        try:
            records = model.query.order_by(model.row_id).all()
        except SQLAlchemyError as e:
            raise StoreError(f"Could not read {table}: {e}") from e
        return [self._to_row(record, columns) for record in records]

    def update_row(self, table: str, key: str, key_value: str, values: Mapping[str, object]) -> Row:
        columns = check_table(table)
        model = self._model(table)
        try:
            record = model.query.filter(getattr(model, key) == key_value).first()
            if record is None:
                raise RowNotFoundError(table, key_value)
            for column, value in values.items():
                if column in columns:
                    setattr(record, column, cell(value))
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StoreError(f"Could not update {table}: {e}") from e
        logger.debug("Updated %s row %s=%s", table, key, key_value)
        return self._to_row(record, columns)

    def append_row(self, table: str, values: Mapping[str, object]) -> Row:
        columns = check_table(table)
        model = self._model(table)
        record = model(**{column: cell(values.get(column)) for column in columns})
        try:
            db.session.add(record)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StoreError(f"Could not append to {table}: {e}") from e
        logger.debug("Appended row to %s", table)
        return self._to_row(record, columns)
