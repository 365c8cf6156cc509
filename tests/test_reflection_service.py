from datetime import datetime, timezone
from unittest import mock

import pytest

from paperdrill_app.core.error_handlers import NotFoundError, StoreError
from paperdrill_app.modules.reflection.schemas import Reflection
from paperdrill_app.modules.reflection.services.reflection_service import ReflectionService
from paperdrill_app.store import ARTICLES_TABLE, LOG_TABLE

NOW = datetime(2026, 10, 19, 1, 0, tzinfo=timezone.utc)
NOTES = Reflection(purpose='Why cats sit', methods='Observation', results='Mats win', memo='')
STATS = {'sentences': 2, 'words': 9}


def article_row(store, article_id):
    return next(r for r in store.list_rows(ARTICLES_TABLE) if r['id'] == article_id)


def test_submit_marks_done_and_writes_ledger(seeded_store):
    outcome = ReflectionService.submit_reflection(seeded_store, 'a1', 'Cats', NOTES, STATS, NOW)

    assert outcome.saved and outcome.ledger_recorded
    row = article_row(seeded_store, 'a1')
    assert row['status'] == 'Done'
    assert row['purpose'] == 'Why cats sit'
    assert row['memo'] == ''
    assert row['game_data']

    ledger = seeded_store.list_rows(LOG_TABLE)
    assert ledger == [{
        'date': '2026-10-19', 'article_id': 'a1', 'title': 'Cats',
        'count_sentences': '2', 'count_words': '9',
    }]


def test_unknown_article_writes_nothing(seeded_store):
    with pytest.raises(NotFoundError):
        ReflectionService.submit_reflection(seeded_store, 'ghost', 'Ghost', NOTES, STATS, NOW)
    assert seeded_store.list_rows(LOG_TABLE) == []


def test_ledger_failure_is_swallowed(seeded_store):
    with mock.patch.object(seeded_store, 'append_row', side_effect=StoreError('sheet down')):
        outcome = ReflectionService.submit_reflection(seeded_store, 'a1', 'Cats', NOTES, STATS, NOW)

    assert outcome.saved is True
    assert outcome.ledger_recorded is False
    assert article_row(seeded_store, 'a1')['status'] == 'Done'
    assert seeded_store.list_rows(LOG_TABLE) == []


def test_missing_stats_writes_no_ledger_row(seeded_store):
    outcome = ReflectionService.submit_reflection(seeded_store, 'a1', 'Cats', NOTES, None, NOW)

    assert outcome.saved is True
    assert outcome.ledger_recorded is False
    assert article_row(seeded_store, 'a1')['status'] == 'Done'
    assert seeded_store.list_rows(LOG_TABLE) == []


def test_empty_stats_records_zero_counts(seeded_store):
    assert ReflectionService.record_completion(seeded_store, 'a1', 'Cats', {}, NOW)
    entry = seeded_store.list_rows(LOG_TABLE)[0]
    assert (entry['count_sentences'], entry['count_words']) == ('0', '0')


def test_resubmission_appends_a_second_ledger_row(seeded_store):
    ReflectionService.submit_reflection(seeded_store, 'a1', 'Cats', NOTES, STATS, NOW)
    ReflectionService.submit_reflection(seeded_store, 'a1', 'Cats', NOTES, STATS, NOW)
    assert len(seeded_store.list_rows(LOG_TABLE)) == 2
