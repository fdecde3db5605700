import os

# base en memoria antes de importar la app (get_settings está cacheado)
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["API_KEY"] = "test-key"
os.environ["CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.db import Base, SessionLocal, engine
from app.main import app

API = "/api/v1"


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_role(client):
    def _make(name="Engineer", min_salary=None):
        body = {"name": name}
        if min_salary is not None:
            body["min_salary"] = min_salary
        resp = client.post(f"{API}/roles", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def make_employee(client):
    def _make(name="Mario", surname="Rossi", hiring_date="2023-03-15", role_name="Engineer", **extra):
        body = {"name": name, "surname": surname, "hiring_date": hiring_date, "role_name": role_name}
        body.update(extra)
        resp = client.post(f"{API}/employees", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def make_project(client):
    def _make(name="Apollo", description="Internal platform", **extra):
        body = {"name": name, "description": description}
        body.update(extra)
        resp = client.post(f"{API}/projects", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def make_technology(client):
    def _make(name="Python", description=None):
        resp = client.post(f"{API}/technologies", json={"name": name, "description": description})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make
