import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlalchemy.pool import StaticPool

from app.main import app
from app.dependencies import get_db

@pytest.fixture
def engine():
    """
    In-memory SQLite database shared across connections for one test.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()

@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session

@pytest.fixture
def client(engine):
    def get_test_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def org(client):
    return client.post("/orgs", json={"name": "Acme"}).json()

@pytest.fixture
def playbook(client, org):
    payload = {"organization_id": org["id"], "name": "deploy", "content": "---"}
    return client.post("/playbooks", json=payload).json()
