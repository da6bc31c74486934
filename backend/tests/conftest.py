import pytest
import sys
from pathlib import Path

# Add the backend directory to the path so we can import app
sys.path.insert(0, str(Path(__file__).parent.parent))

# Now import the Flask app
from app import app as flask_app
from alumni_data import AlumniRecord


def _make_records(count, course="MCA"):
    return [
        AlumniRecord(Name=f"Alumnus {i:03d}", Course=course, Batch=str(2024 - i))
        for i in range(count)
    ]


@pytest.fixture
def make_records():
    """Factory for `count` records with distinct names and descending batch years."""
    return _make_records


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as client:
        yield client


@pytest.fixture
def records_client(monkeypatch):
    """Client factory backed by a replacement alumni list."""
    def _make(records):
        monkeypatch.setitem(flask_app.config, "ALUMNI_RECORDS", list(records))
        monkeypatch.setitem(flask_app.config, "PAGE_SIZE", 25)
        flask_app.config["TESTING"] = True
        return flask_app.test_client()
    return _make
