import json
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from paperdrill_app import create_app, db
from paperdrill_app.core.config import Config
from paperdrill_app.store import ARTICLES_TABLE, set_store
from paperdrill_app.store.sql_store import SqlRecordStore

PASSWORD = 'open-sesame'

CAT_SENTENCE = {
    'original': 'The cat sat on the mat.',
    'japanese': '猫がマットの上に座った。',
    'words': ['The', 'cat', 'sat', 'on', 'the', 'mat.'],
}
DOG_SENTENCE = {
    'original': 'Dogs bark loudly.',
    'japanese': '犬は大きな声で吠える。',
    'words': ['Dogs', 'bark', 'loudly.'],
}


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    WTF_CSRF_ENABLED = False
    STORE_BACKEND = 'sql'
    APP_PASSWORD = PASSWORD
    DISPLAY_UTC_OFFSET_HOURS = 9
    ANSWER_WHITESPACE_MODE = 'collapse'
    LOG_DIR = None


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in_client(client):
    response = client.post('/api/login', json={'password': PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def store(app):
    store = SqlRecordStore()
    set_store(app, store)
    return store


def make_article_row(article_id, title='Paper', tags='', status='', stats=None, sentences=None):
    return {
        'id': article_id,
        'title': title,
        'tags': tags,
        'status': status,
        'stats': json.dumps(stats) if stats is not None else '',
        'game_data': json.dumps(sentences, ensure_ascii=False) if sentences is not None else '',
    }


@pytest.fixture
def seeded_store(store):
    store.append_row(ARTICLES_TABLE, make_article_row(
        'a1', title='Cats', tags='biology, pets', stats={'sentences': 2, 'words': 9},
        sentences=[CAT_SENTENCE, DOG_SENTENCE],
    ))
    store.append_row(ARTICLES_TABLE, make_article_row(
        'a2', title='Pending paper', stats={'sentences': 5, 'words': 80},
    ))
    store.append_row(ARTICLES_TABLE, make_article_row(
        'a3', title='Already read', status='Done', stats={'sentences': 1, 'words': 6},
        sentences=[CAT_SENTENCE],
    ))
    return store
