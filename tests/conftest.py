import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from judging.core.database import create_db_engine, get_db, init_db
from judging.main import app

API = "/api"


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_maker(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_maker):
    session = session_maker()
    yield session
    session.close()


@pytest.fixture
def api_client(session_maker) -> TestClient:
    def override_get_db():
        session = session_maker()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def register_student(api_client):
    def _register(email="student@example.com", name="Sam", password="strongpassword123"):
        resp = api_client.post(
            f"{API}/student/register",
            json={"name": name, "email": email, "password": password},
        )
        assert resp.status_code == 201, resp.text

        resp = api_client.post(f"{API}/student/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return resp.json()["user"]["id"]

    return _register


@pytest.fixture
def create_judge(api_client):
    def _create(judge_id="judge-1", password="judgepassword"):
        resp = api_client.post(f"{API}/judges", json={"id": judge_id, "password": password})
        assert resp.status_code == 200, resp.text
        return judge_id

    return _create


@pytest.fixture
def create_event(api_client):
    def _create(name="Hack1", date="2026-03-01"):
        resp = api_client.post(f"{API}/events", json={"name": name, "date": date})
        assert resp.status_code == 200, resp.text
        events = api_client.get(f"{API}/events").json()
        return next(e["id"] for e in events if e["name"] == name)

    return _create


@pytest.fixture
def create_project(api_client):
    def _create(event_id, user_id, title="P1", description="A project"):
        resp = api_client.post(
            f"{API}/projects",
            json={"title": title, "description": description, "event_id": event_id, "user_id": user_id},
        )
        assert resp.status_code == 200, resp.text
        projects = api_client.get(f"{API}/projects/event/{event_id}").json()
        return next(p["id"] for p in projects if p["title"] == title)

    return _create


@pytest.fixture
def submit_review(api_client):
    def _submit(judge_id, project_id, score, feedback=""):
        return api_client.post(
            f"{API}/projects/review",
            json={"judgeId": judge_id, "projectId": project_id, "score": score, "feedback": feedback},
        )

    return _submit
