from conftest import PASSWORD


def test_api_login(client):
    response = client.post('/api/login', json={'password': PASSWORD})
    assert response.status_code == 200
    assert response.get_json() == {'success': True}


def test_api_login_wrong_password(client):
    response = client.post('/api/login', json={'password': 'nope'})
    assert response.status_code == 401
    body = response.get_json()
    assert body['success'] is False
    assert body['code'] == 'UNAUTHORIZED'

    assert client.post('/api/login', json={}).status_code == 401
    assert client.post('/api/login', data='not json').status_code == 401


def test_login_sets_long_lived_cookie(client):
    response = client.post('/api/login', json={'password': PASSWORD})
    cookies = response.headers.getlist('Set-Cookie')
    assert any('Expires=' in c or 'Max-Age=' in c for c in cookies)
    assert all('HttpOnly' in c for c in cookies)


def test_pages_redirect_to_login_without_cookie(client):
    for path in ('/', '/exercise/a1'):
        response = client.get(path)
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/login')


def test_login_page_is_public(client):
    response = client.get('/login')
    assert response.status_code == 200
    assert b'Password' in response.data


def test_login_page_redirects_when_logged_in(logged_in_client):
    response = logged_in_client.get('/login')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/')


def test_api_is_not_gated(client, seeded_store):
    assert client.get('/api/articles').status_code == 200


def test_form_login_and_logout(client, seeded_store):
    response = client.post('/login', data={'password': 'wrong'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login')
    assert client.get('/').status_code == 302

    response = client.post('/login', data={'password': PASSWORD})
    assert response.status_code == 302
    assert client.get('/').status_code == 200

    client.post('/logout')
    assert client.get('/').status_code == 302


def test_empty_configured_password_rejects_everything(app, client):
    app.config['APP_PASSWORD'] = ''
    assert client.post('/api/login', json={'password': ''}).status_code == 401


def test_exercise_api_requires_login(client, seeded_store):
    response = client.post('/api/exercise/start/a1')
    assert response.status_code == 401
    assert response.get_json()['code'] == 'UNAUTHORIZED'
    assert client.get('/api/exercise/state').status_code == 401
