import os
import sys
import pytest

# Ensure the backend root (containing the `debategame` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from debategame import create_app, db
from debategame.services.debates.judge import ArgumentJudge


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = 'http://localhost:5173'
    OPENAI_API_KEY = None


class StubJudge(ArgumentJudge):
    """Records every call; returns ``score`` or raises ``error`` when set."""

    def __init__(self, score=50):
        self.score = score
        self.error = None
        self.calls = []

    @property
    def name(self):
        return 'stub'

    def score_argument(self, content, previous_content=None):
        self.calls.append((content, previous_content))
        if self.error is not None:
            raise self.error
        return self.score


@pytest.fixture()
def judge():
    return StubJudge()


@pytest.fixture()
def flask_app(judge):
    application = create_app(TestConfig)
    application.extensions['argument_judge'] = judge
    with application.app_context():
        # Ensure models are imported so tables are created
        import debategame.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def users(client):
    for username in ('alice', 'bob', 'carol'):
        assert client.post('/users', json={'username': username}).status_code == 201
    return ('alice', 'bob', 'carol')


@pytest.fixture()
def private_debate(client, users):
    res = client.post('/api/debates/private', json={
        'title': 'Pineapple belongs on pizza',
        'opponent': 'bob',
        'authorUsername': 'alice',
    })
    assert res.status_code == 201
    return res.get_json()['data']['debate']
