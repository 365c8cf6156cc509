# File: paperdrill_app/store/sheets_store.py
"""
Google Sheets record store.

The spreadsheet holds the Articles table on its first worksheet and the
completion ledger on its second; the first row of each worksheet is the
header naming the columns.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping

import gspread
from gspread.exceptions import GSpreadException
from gspread.utils import rowcol_to_a1
from google.oauth2.service_account import Credentials

from ..core.error_handlers import RowNotFoundError, StoreError
from .base import ARTICLES_TABLE, LOG_TABLE, RecordStore, Row, cell, check_table

logger = logging.getLogger(__name__)

SCOPES = ['https://www.googleapis.com/auth/spreadsheets']
TOKEN_URI = 'https://oauth2.googleapis.com/token'

WORKSHEET_INDEXES: Dict[str, int] = {
    ARTICLES_TABLE: 0,
    LOG_TABLE: 1,
}


class SheetsRecordStore(RecordStore):
    """Record store on a gspread ``Spreadsheet``."""

    def __init__(self, spreadsheet):
        self._spreadsheet = spreadsheet

    @classmethod
    def from_service_account(cls, client_email: str, private_key: str, sheet_id: str) -> "SheetsRecordStore":
        """Authorize with service-account credentials and open ``sheet_id``."""
        if not (client_email and private_key and sheet_id):
            raise StoreError("Google Sheets backend needs a service account email, private key and sheet id")
        credentials = Credentials.from_service_account_info(
            {
                'type': 'service_account',
                'client_email': client_email,
                'private_key': private_key,
                'token_uri': TOKEN_URI,
            },
            scopes=SCOPES,
        )
        try:
            client = gspread.authorize(credentials)
            spreadsheet = client.open_by_key(sheet_id)
        except (GSpreadException, OSError) as e:
            raise StoreError(f"Could not open spreadsheet {sheet_id}: {e}") from e
        logger.info("Opened spreadsheet %s", sheet_id)
        return cls(spreadsheet)

    def _worksheet(self, table: str):
        check_table(table)
        return self._spreadsheet.get_worksheet(WORKSHEET_INDEXES[table])

    @staticmethod
    def _records(worksheet) -> List[Row]:
        # Keep every cell a string: ids and dates must not be coerced to numbers
        records = worksheet.get_all_records(numericise_ignore=['all'], default_blank='')
        return [{str(k): cell(v) for k, v in record.items()} for record in records]

    def list_rows(self, table: str) -> List[Row]:
        try:
            return self._records(self._worksheet(table))
        except (GSpreadException, OSError) as e:
            raise StoreError(f"Could not read {table}: {e}") from e

    def update_row(self, table: str, key: str, key_value: str, values: Mapping[str, object]) -> Row:
        try:
            worksheet = self._worksheet(table)
            records = self._records(worksheet)
            header = worksheet.row_values(1)
        except (GSpreadException, OSError) as e:
            raise StoreError(f"Could not read {table}: {e}") from e

        for position, record in enumerate(records):
            if record.get(key) == key_value:
                break
        else:
            raise RowNotFoundError(table, key_value)

        sheet_row = position + 2  # header row + 1-based rows
        updates = []
        for column, value in values.items():
            if column not in header:
                logger.warning("Column %s missing from %s header, skipping", column, table)
                continue
            updates.append({
                'range': rowcol_to_a1(sheet_row, header.index(column) + 1),
                'values': [[cell(value)]],
            })
            record[column] = cell(value)

        if updates:
            try:
                worksheet.batch_update(updates)
            except (GSpreadException, OSError) as e:
                raise StoreError(f"Could not update {table}: {e}") from e
        return record

    def append_row(self, table: str, values: Mapping[str, object]) -> Row:
        try:
            worksheet = self._worksheet(table)
            header = worksheet.row_values(1) or list(check_table(table))
            worksheet.append_row([cell(values.get(column)) for column in header], value_input_option='RAW')
        except (GSpreadException, OSError) as e:
            raise StoreError(f"Could not append to {table}: {e}") from e
        return {column: cell(values.get(column)) for column in header}
