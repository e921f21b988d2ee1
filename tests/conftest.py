import os

# Dùng SQLite in-memory thay cho Postgres khi chạy test
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from faculty_eval.api.deps import get_db
from faculty_eval.database import Base
from main import app

SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


@pytest.fixture()
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db_session):
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def catalog(client):
    """2 câu hỏi nhóm A và 3 câu hỏi nhóm B."""
    questions = []
    for category, category_name, count in (("A", "Teaching Effectiveness", 2), ("B", "Classroom Management", 3)):
        for idx in range(count):
            response = client.post("/api/v1/questions", json={
                "category": category,
                "category_name": category_name,
                "question_text": f"{category_name} question {idx + 1}",
            })
            assert response.status_code == 201
            questions.append(response.json())
    return questions


@pytest.fixture()
def teacher(client):
    response = client.post("/api/v1/teachers", json={"name": "Juan Dela Cruz", "department": "ICT"})
    assert response.status_code == 201
    return response.json()
