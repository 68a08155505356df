import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from app.auth import hash_password
from app.database import enable_sqlite_foreign_keys, get_session, seed_categories
from app.main import app
from app.models.user import User


@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        seed_categories(session, ["General", "Programming"])
        # Seed admin user
        admin = User(
            username="admin",
            email="admin@example.com",
            password_hash=hash_password("admin", rounds=4),
            role="admin",
        )
        session.add(admin)
        session.commit()
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def register_and_login(client: TestClient):
    def _register_and_login(username: str, email: str, password: str) -> str:
        response = client.post(
            "/api/register",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 201
        response = client.post(
            "/api/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200
        return response.json()["token"]

    return _register_and_login


@pytest.fixture
def admin_token(client: TestClient) -> str:
    response = client.post(
        "/api/login",
        json={"email": "admin@example.com", "password": "admin"},
    )
    return response.json()["token"]


@pytest.fixture
def user_token(register_and_login) -> str:
    return register_and_login("alice", "alice@example.com", "alicepass")


@pytest.fixture
def other_token(register_and_login) -> str:
    return register_and_login("bob", "bob@example.com", "bobpass")


@pytest.fixture
def question(client: TestClient, user_token: str) -> dict:
    """A question posted by alice, as returned by the detail endpoint."""
    response = client.post(
        "/api/questions",
        json={
            "title": "How do I sort a dict?",
            "category_id": 2,
            "description": "By value, not by key.",
        },
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 201
    question_id = response.json()["id"]
    return client.get(f"/api/questions/{question_id}").json()["question"]


@pytest.fixture
def answer(client: TestClient, question: dict, other_token: str) -> dict:
    """An answer by bob on alice's question."""
    response = client.post(
        f"/api/questions/{question['id']}/answers",
        json={"content": "Use sorted() with a key function."},
        headers={"Authorization": f"Bearer {other_token}"},
    )
    assert response.status_code == 201
    return {"id": response.json()["id"], "question_id": question["id"]}
