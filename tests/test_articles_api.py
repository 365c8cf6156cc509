from paperdrill_app.store import ARTICLES_TABLE, LOG_TABLE

from conftest import CAT_SENTENCE, DOG_SENTENCE


def test_get_articles_shape(client, seeded_store):
    response = client.get('/api/articles')
    assert response.status_code == 200
    body = response.get_json()

    assert [a['id'] for a in body['articles']] == ['a1', 'a2', 'a3']
    first = body['articles'][0]
    assert first == {
        'id': 'a1',
        'title': 'Cats',
        'tags': ['biology', 'pets'],
        'status': 'New',
        'stats': {'sentences': 2, 'words': 9},
        'gameData': [CAT_SENTENCE, DOG_SENTENCE],
    }
    assert body['articles'][1]['gameData'] is None
    assert body['articles'][2]['status'] == 'Done'
    assert body['dailyStats'] == {'papers': 0, 'sentences': 0, 'words': 0}


def test_get_articles_malformed_row_is_an_error(client, store):
    store.append_row(ARTICLES_TABLE, {'id': 'bad', 'title': 'Bad', 'game_data': '[{'})
    response = client.get('/api/articles')
    assert response.status_code == 500
    assert response.get_json()['code'] == 'MALFORMED_PAYLOAD'


def test_post_articles_saves_reflection(client, seeded_store):
    response = client.post('/api/articles', json={
        'id': 'a1', 'title': 'Cats',
        'purpose': 'p', 'methods': 'm', 'results': 'r', 'memo': '',
        'stats': {'sentences': 2, 'words': 9},
    })
    assert response.status_code == 200
    assert response.get_json() == {'success': True}

    row = next(r for r in seeded_store.list_rows(ARTICLES_TABLE) if r['id'] == 'a1')
    assert (row['status'], row['purpose'], row['methods'], row['results']) == ('Done', 'p', 'm', 'r')
    ledger = seeded_store.list_rows(LOG_TABLE)
    assert len(ledger) == 1
    assert ledger[0]['article_id'] == 'a1'

    today = client.get('/api/articles').get_json()['dailyStats']
    assert today == {'papers': 1, 'sentences': 2, 'words': 9}


def test_post_articles_unknown_id(client, seeded_store):
    response = client.post('/api/articles', json={'id': 'ghost', 'title': 'Ghost'})
    assert response.status_code == 404
    assert response.get_json()['success'] is False
    assert seeded_store.list_rows(LOG_TABLE) == []


def test_post_articles_requires_id(client, seeded_store):
    assert client.post('/api/articles', json={'title': 'x'}).status_code == 400
    assert client.post('/api/articles', data='garbage').status_code == 400


def test_unknown_api_path_is_json_404(client):
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert response.get_json()['code'] == 'NOT_FOUND'


def test_get_articles_follows_row_order_not_id_order(client, store):
    store.append_row(ARTICLES_TABLE, {'id': 'z-first', 'title': 'Zebra'})
    store.append_row(ARTICLES_TABLE, {'id': 'a-second', 'title': 'Ant'})
    ids = [a['id'] for a in client.get('/api/articles').get_json()['articles']]
    assert ids == ['z-first', 'a-second']


def test_post_articles_without_stats_skips_ledger(client, seeded_store):
    response = client.post('/api/articles', json={'id': 'a1', 'title': 'Cats', 'memo': 'short'})
    assert response.status_code == 200
    assert response.get_json() == {'success': True}

    row = next(r for r in seeded_store.list_rows(ARTICLES_TABLE) if r['id'] == 'a1')
    assert row['status'] == 'Done'
    assert seeded_store.list_rows(LOG_TABLE) == []
    assert client.get('/api/articles').get_json()['dailyStats']['papers'] == 0
