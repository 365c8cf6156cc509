import pytest

from paperdrill_app.store import ARTICLES_TABLE, LOG_TABLE

from conftest import CAT_SENTENCE, DOG_SENTENCE, PASSWORD


@pytest.fixture(autouse=True)
def learner_session(client):
    assert client.post('/api/login', json={'password': PASSWORD}).status_code == 200


def api(client, path, **body):
    response = client.post(f'/api/exercise/{path}', json=body)
    return response.status_code, response.get_json()


def place_sentence(client, state, words):
    for word in words:
        status, state = api(client, 'place', poolIndex=state['pool'].index(word), word=word)
        assert status == 200
    return state


def solve(client, state, words):
    state = place_sentence(client, state, words)
    status, state = api(client, 'check')
    assert state['phase'] == 'correct'
    status, state = api(client, 'advance')
    return state


def test_full_exercise_over_api(client, seeded_store):
    status, state = api(client, 'start/a1')
    assert status == 200
    assert state['phase'] == 'assembling'
    assert state['hint'] == CAT_SENTENCE['japanese']
    assert sorted(state['pool']) == sorted(CAT_SENTENCE['words'])

    state = solve(client, state, CAT_SENTENCE['words'])
    assert state['index'] == 1
    assert state['isLast'] is True

    state = solve(client, state, DOG_SENTENCE['words'])
    assert state['phase'] == 'completed'

    status, body = api(client, 'skip')
    assert status == 409
    assert body['code'] == 'INVALID_TRANSITION'


def test_wrong_answer_retry_and_reorder(client, seeded_store):
    _, state = api(client, 'start/a1')
    state = place_sentence(client, state, ['cat', 'The', 'sat', 'on', 'the', 'mat.'])
    _, state = api(client, 'check')
    assert state['phase'] == 'incorrect'
    assert 'reference' not in state

    _, state = api(client, 'retry')
    assert [t['text'] for t in state['placed']] == ['cat', 'The', 'sat', 'on', 'the', 'mat.']

    _, state = api(client, 'reorder', tileId=state['placed'][1]['id'], position=0)
    assert [t['text'] for t in state['placed']][:2] == ['The', 'cat']
    _, state = api(client, 'check')
    assert state['phase'] == 'correct'
    assert state['reference'] == CAT_SENTENCE['original']


def test_remove_reveal_hide_skip(client, seeded_store):
    _, state = api(client, 'start/a1')
    state = place_sentence(client, state, ['sat'])
    _, state = api(client, 'remove', tileId=state['placed'][0]['id'])
    assert state['placed'] == []
    assert state['pool'][-1] == 'sat'

    _, state = api(client, 'reveal')
    assert state['reference'] == CAT_SENTENCE['original']
    status, _ = api(client, 'place', poolIndex=0)
    assert status == 409
    _, state = api(client, 'hide')
    assert state['phase'] == 'assembling'

    _, state = api(client, 'skip')
    assert state['index'] == 1


@pytest.mark.parametrize('body', [{}, {'poolIndex': 'one'}, {'poolIndex': 99}, {'poolIndex': True}])
def test_place_validation(client, seeded_store, body):
    api(client, 'start/a1')
    status, payload = api(client, 'place', **body)
    assert status == 400
    assert payload['code'] == 'VALIDATION_ERROR'


def test_cannot_start_done_pending_or_unknown_articles(client, seeded_store):
    assert api(client, 'start/a3')[0] == 409
    assert api(client, 'start/a2')[0] == 409
    assert api(client, 'start/ghost')[0] == 404


def test_state_and_exit(client, seeded_store):
    assert client.get('/api/exercise/state').status_code == 404
    api(client, 'start/a1')
    assert client.get('/api/exercise/state').get_json()['articleId'] == 'a1'
    assert api(client, 'exit') == (200, {'success': True})
    assert client.get('/api/exercise/state').status_code == 404


def test_start_resumes_same_article(client, seeded_store):
    _, first = api(client, 'start/a1')
    first = place_sentence(client, first, [first['pool'][0]])
    _, again = api(client, 'start/a1')
    assert again['placed'] == first['placed']


def test_unknown_action(client, seeded_store):
    api(client, 'start/a1')
    assert api(client, 'jump')[0] == 400


def test_finish_page_flow_uses_catalog_snapshot(logged_in_client, seeded_store):
    client = logged_in_client
    page = client.get('/')
    assert b'Cats' in page.data
    assert b'Today: 0 papers' in page.data

    assert client.get('/exercise/a1').status_code == 200
    state = client.get('/api/exercise/state').get_json()
    state = solve(client, state, CAT_SENTENCE['words'])
    solve(client, state, DOG_SENTENCE['words'])

    page = client.get('/exercise/a1')
    assert b'All sentences done' in page.data
    assert b'Save and finish' in page.data

    response = client.post('/exercise/a1/finish', data={'purpose': 'cats', 'memo': 'mats'})
    assert response.status_code == 302
    assert 'snapshot=1' in response.headers['Location']

    row = next(r for r in seeded_store.list_rows(ARTICLES_TABLE) if r['id'] == 'a1')
    assert row['status'] == 'Done'
    assert row['memo'] == 'mats'
    assert len(seeded_store.list_rows(LOG_TABLE)) == 1

    # Changed behind the snapshot; the page must not re-read the store
    seeded_store.update_row(ARTICLES_TABLE, 'id', 'a2', {'title': 'Renamed in store'})
    page = client.get(response.headers['Location'])
    assert b'Today: 1 paper' in page.data
    assert b'Pending paper' in page.data
    assert b'Renamed in store' not in page.data
    assert b'Nothing left to practice.' in page.data

    assert client.get('/api/exercise/state').status_code == 404


def test_finish_before_completion_redirects(logged_in_client, seeded_store):
    client = logged_in_client
    client.get('/exercise/a1')
    response = client.post('/exercise/a1/finish', data={'purpose': 'early'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/exercise/a1')
    row = next(r for r in seeded_store.list_rows(ARTICLES_TABLE) if r['id'] == 'a1')
    assert row['status'] == ''


def test_done_article_page_redirects_to_catalog(logged_in_client, seeded_store):
    response = logged_in_client.get('/exercise/a3')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/')
