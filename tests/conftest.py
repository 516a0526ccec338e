"""Pytest configuration and fixtures."""
import pytest
from fastapi.testclient import TestClient

from roktokona.core.config import Settings
from roktokona.database.database import Database
from roktokona.main import create_app

INDEX_HTML = "<!doctype html><html><body>Roktokona</body></html>"


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file and front-end bundle."""
    frontend = tmp_path / "frontend"
    frontend.mkdir()
    (frontend / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (frontend / "app.js").write_text("console.log('ok');", encoding="utf-8")

    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'database' / 'blood_donors.db'}",
        STATIC_DIRECTORY=str(frontend),
        ENVIRONMENT="test",
    )


@pytest.fixture
def database(settings):
    database = Database(settings.DATABASE_URL)
    yield database
    database.dispose()


@pytest.fixture
def client(settings, database):
    app = create_app(settings, database)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db_session(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def donor_payload():
    return {
        "firstName": "Karim",
        "lastName": "Uddin",
        "email": "k@example.com",
        "phone": "+8801711112222",
        "bloodType": "O+",
        "gender": "Male",
        "city": "Dhaka",
    }


@pytest.fixture
def index_html():
    return INDEX_HTML
