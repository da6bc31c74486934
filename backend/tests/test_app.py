"""Tests for the Flask application."""
import pytest
import sys
from pathlib import Path

# Add backend directory to path
backend_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(backend_dir))

from app import app


@pytest.fixture
def client():
    """Create a test client for the Flask app."""
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def test_home_route(client):
    """Test that the home route renders the landing page."""
    response = client.get('/')
    assert response.status_code == 200
    assert b'Alumni Association' in response.data


@pytest.mark.parametrize("path, heading", [
    ('/events', b'Events'),
    ('/faculty', b'Faculty'),
    ('/reachus', b'Reach Us'),
])
def test_static_pages(client, path, heading):
    response = client.get(path)
    assert response.status_code == 200
    assert heading in response.data


def test_navigation_links_on_every_page(client):
    response = client.get('/events')
    for href in (b'href="/"', b'href="/alumni"', b'href="/form"'):
        assert href in response.data


def test_404_handler(client):
    """Test that 404 errors are handled properly."""
    response = client.get('/nonexistent-page')
    assert response.status_code == 404
    assert b'Page not found' in response.data


def test_app_has_secret_key():
    """Test that the app has a secret key configured."""
    assert app.config['SECRET_KEY'] is not None
    assert len(app.config['SECRET_KEY']) > 0


def test_contact_form_renders(client):
    response = client.get('/form')
    assert response.status_code == 200
    assert b'<form' in response.data


def test_contact_form_missing_fields(client):
    response = client.post('/form', data={'name': 'Asha', 'email': '', 'message': ''})
    assert response.status_code == 400
    assert response.data.count(b'This field is required.') == 2


def test_contact_form_invalid_email(client):
    response = client.post('/form', data={'name': 'Asha', 'email': 'asha.example.com', 'message': 'Hi'})
    assert response.status_code == 400
    assert b'Enter a valid email address.' in response.data


def test_contact_form_success(client):
    response = client.post('/form', data={'name': 'Asha', 'email': 'asha@example.com', 'message': 'Hi'})
    assert response.status_code == 200
    assert b'Thank you' in response.data
