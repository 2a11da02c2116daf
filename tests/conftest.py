import pytest
from fastapi.testclient import TestClient

from student_records_api.app.main import create_app
from student_records_api.app.services.student_service import StudentService


@pytest.fixture
def service():
    return StudentService()


@pytest.fixture
def app(service):
    return create_app(service=service)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def alice():
    return {
        "name": "Alice",
        "registrationNumber": "R1",
        "courses": ["CS101"],
        "projectGroup": "G1",
    }


@pytest.fixture
def bob():
    return {
        "name": "Bob",
        "registrationNumber": "R2",
        "courses": ["CS101", "MA201"],
        "projectGroup": "G2",
    }
