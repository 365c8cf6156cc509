import pytest

from paperdrill_app.modules.exercise.services.workspace import WorkspaceRegistry, get_registry

from conftest import PASSWORD


def login(client):
    assert client.post('/api/login', json={'password': PASSWORD}).status_code == 200
    return client


def test_anonymous_catalog_reads_create_no_workspace(app, seeded_store):
    for _ in range(50):
        assert app.test_client().get('/api/articles').status_code == 200
    assert len(get_registry()) == 0


def test_anonymous_exercise_calls_create_no_workspace(app, seeded_store):
    for _ in range(5):
        client = app.test_client()
        assert client.post('/api/exercise/start/a1').status_code == 401
        assert client.post('/api/exercise/check').status_code == 401
    assert len(get_registry()) == 0


def test_logged_in_catalog_read_keeps_one_snapshot(app, seeded_store):
    client = login(app.test_client())
    client.get('/api/articles')
    client.get('/api/articles')
    assert len(get_registry()) == 1


def test_login_again_replaces_the_workspace(app, seeded_store):
    client = login(app.test_client())
    client.post('/api/exercise/start/a1')
    assert len(get_registry()) == 1

    login(client)
    assert len(get_registry()) == 0
    assert client.get('/api/exercise/state').status_code == 404


def test_registry_size_is_capped(app, seeded_store):
    app.config['WORKSPACE_REGISTRY_SIZE'] = 3
    clients = [login(app.test_client()) for _ in range(5)]
    for client in clients:
        assert client.post('/api/exercise/start/a1').status_code == 200
    assert len(get_registry()) == 3

    # The oldest learner lost their exercise; the newest still has it
    assert clients[0].get('/api/exercise/state').status_code == 404
    assert clients[-1].get('/api/exercise/state').status_code == 200


def test_least_recently_used_is_evicted_first(app):
    registry = WorkspaceRegistry(capacity=2)
    a = registry.get('a')
    registry.get('b')
    assert registry.find('a') is a
    registry.get('c')

    assert registry.find('b') is None
    assert registry.find('a') is a
    assert len(registry) == 2


@pytest.mark.parametrize('key', [None, '', 'missing'])
def test_find_never_creates(key):
    registry = WorkspaceRegistry()
    assert registry.find(key) is None
    assert len(registry) == 0
