import sqlite3

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from jobboard.config import settings
from jobboard.database import _set_sqlite_pragmas, get_db, init_db
from jobboard.main import app


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "jobboard.sqlite"
    init_db(path)
    return path


@pytest.fixture
def test_db(db_path):
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def db(test_db):
    session = test_db()
    yield session
    session.close()


@pytest.fixture
def client(tmp_path, test_db):
    original_data_dir = settings.data_dir
    settings.data_dir = tmp_path
    c = TestClient(app)
    yield c
    settings.data_dir = original_data_dir


@pytest.fixture
def fail_inserts(db_path):
    """Make every INSERT into the given table abort, as a broken database would."""

    def _fail(table: str):
        conn = sqlite3.connect(str(db_path))
        conn.execute(
            f"CREATE TRIGGER fail_{table} BEFORE INSERT ON {table} "
            "BEGIN SELECT RAISE(ABORT, 'simulated storage failure'); END;"
        )
        conn.commit()
        conn.close()

    return _fail


@pytest.fixture
def job_payload():
    def _build(**overrides):
        payload = {
            "title": "Backend Engineer",
            "company": "Acme",
            "qualification": "B.Tech",
            "vacancy": 2,
            "skills": ["Go", "Go", "SQL"],
            "location": "Remote",
            "applyLink": "https://acme.example/apply",
            "mathA": 3,
            "mathB": 4,
            "mathAnswer": 7,
        }
        payload.update(overrides)
        return payload

    return _build
