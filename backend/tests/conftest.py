import os
import sys
import pytest

# Ensure the backend root (containing the `leaderboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from leaderboard import create_app, db
from leaderboard.services.scores import ScoreStore


class TestConfig:
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = '*'
    CORS_METHODS = ['GET', 'POST']
    CORS_ALLOW_HEADERS = '*'
    CORS_SEND_WILDCARD = True
    SUBMIT_MAX_RETRIES = 3


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def store(flask_app):
    return ScoreStore(db.session, max_retries=flask_app.config['SUBMIT_MAX_RETRIES'])
