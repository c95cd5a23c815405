import pytest
from fastapi.testclient import TestClient

from estate_board.config import Settings
from estate_board.database import Base, get_db, make_engine, make_session_factory
from estate_board.main import create_app
from estate_board.security import get_password_hash
from estate_board.services.listing_store import ListingStore
import estate_board.models  # noqa: F401

ADMIN_PASSWORD = "correct horse battery staple"


@pytest.fixture(scope="session")
def admin_password_hash():
    return get_password_hash(ADMIN_PASSWORD)


@pytest.fixture
def settings(admin_password_hash):
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        admin_password_hash=admin_password_hash,
        session_secret="test-session-secret",
        upload_max_file_size=1024,
        upload_max_files=3,
        feed_url=None,
    )


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return ListingStore(db, default_type="mieszkanie")


@pytest.fixture
def app(settings, session_factory):
    app = create_app(settings)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_client(app):
    client = TestClient(app)
    response = client.post("/api/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client
