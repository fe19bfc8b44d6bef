"""Test configuration and fixtures."""

import pytest
from flask import template_rendered

from petclinic import create_app
from petclinic.cli import seed_sample_data
from petclinic.extensions import db as _db
from petclinic.models import Owner


@pytest.fixture
def app():
    """Create application for testing, loaded with the demo clinic."""
    app = create_app('testing')

    with app.app_context():
        _db.create_all()
        seed_sample_data()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    """Test client for making requests."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """CLI test runner."""
    return app.test_cli_runner()


@pytest.fixture
def db(app):
    """Database fixture."""
    return _db


@pytest.fixture
def captured_templates(app):
    """Templates rendered during the test as (template, context) pairs."""
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template, context))

    template_rendered.connect(record, app)
    try:
        yield recorded
    finally:
        template_rendered.disconnect(record, app)


@pytest.fixture
def george(app):
    return Owner.query.filter_by(last_name='Franklin').one()


@pytest.fixture
def flashes(client):
    """Reads the flash messages waiting in the client session."""

    def read():
        with client.session_transaction() as session:
            return list(session.get('_flashes', []))

    return read
