"""
Tests for the command line client.

The client is pointed at the application through FastAPI's TestClient,
which accepts the same ``request(method, url, json=..., timeout=...)``
call the client makes on a ``requests.Session``.
"""

import json

import pytest
import requests

from students_client import StudentsAPI, main, parse_courses


@pytest.fixture
def api(client):
    return StudentsAPI(base_url="http://testserver/", session=client)


def test_create_and_list(api, alice, bob):
    created, error = api.create_student(alice)
    assert error is None
    assert created == {"id": 1, **alice}

    api.create_student(bob)
    students, error = api.list_students()
    assert error is None
    assert [s["id"] for s in students] == [1, 2]


def test_get_missing_student_returns_error(api):
    student, error = api.get_student(5)
    assert student is None
    assert error == {"status_code": 404, "message": "Student not found"}


def test_update_and_delete(api, alice, bob):
    api.create_student(alice)
    updated, error = api.update_student(1, bob)
    assert error is None
    assert updated["name"] == "Bob"

    deleted, error = api.delete_student(1)
    assert (deleted, error) == (True, None)

    deleted, error = api.delete_student(1)
    assert deleted is False
    assert error["status_code"] == 404


def test_clear_students(api, alice):
    api.create_student(alice)
    message, error = api.clear_students()
    assert error is None
    assert message == "All students deleted successfully."
    assert api.list_students() == ([], None)


def test_capacity_error_message(api, alice, service):
    service.capacity = 1
    api.create_student(alice)
    created, error = api.create_student(alice)
    assert created is None
    assert error == {"status_code": 400, "message": "Maximum entries (1) reached"}


def test_connection_error_is_reported():
    class FailingSession:
        def request(self, method, url, **kwargs):
            raise requests.ConnectionError("connection refused")

    api = StudentsAPI(base_url="http://unreachable", session=FailingSession())
    students, error = api.list_students()
    assert students == []
    assert error == {"status_code": None, "message": "connection refused"}


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, []),
        ("", []),
        ("CS101", ["CS101"]),
        (" CS101 , MA201,, ", ["CS101", "MA201"]),
    ],
)
def test_parse_courses(raw, expected):
    assert parse_courses(raw) == expected


class TestCommandLine:
    def test_add_then_list(self, api, capsys):
        status = main(
            [
                "add",
                "--name", "Alice",
                "--registration-number", "R1",
                "--courses", "CS101,MA201",
                "--project-group", "G1",
            ],
            client=api,
        )
        assert status == 0
        created = json.loads(capsys.readouterr().out)
        assert created == {
            "id": 1,
            "name": "Alice",
            "registrationNumber": "R1",
            "courses": ["CS101", "MA201"],
            "projectGroup": "G1",
        }

        assert main(["list"], client=api) == 0
        listed = json.loads(capsys.readouterr().out)
        assert [s["name"] for s in listed] == ["Alice"]

    def test_update_keeps_fields_not_given(self, api, alice, capsys):
        api.create_student(alice)
        assert main(["update", "1", "--name", "Alice B."], client=api) == 0
        updated = json.loads(capsys.readouterr().out)
        assert updated == {**alice, "id": 1, "name": "Alice B."}

        assert main(["get", "1"], client=api) == 0
        fetched = json.loads(capsys.readouterr().out)
        assert fetched["name"] == "Alice B."
        assert fetched["registrationNumber"] == "R1"
        assert fetched["courses"] == ["CS101"]
        assert fetched["projectGroup"] == "G1"

    def test_update_changes_only_given_fields(self, api, alice, capsys):
        api.create_student(alice)
        assert main(["update", "1", "--courses", "PH100, MA201", "--project-group", "G7"], client=api) == 0
        updated = json.loads(capsys.readouterr().out)
        assert updated["courses"] == ["PH100", "MA201"]
        assert updated["projectGroup"] == "G7"
        assert updated["name"] == "Alice"
        assert updated["registrationNumber"] == "R1"

    def test_update_missing_student_fails(self, api, capsys):
        assert main(["update", "4", "--name", "Ghost"], client=api) == 1
        assert "Student not found" in capsys.readouterr().err
        assert api.list_students() == ([], None)

    def test_delete_missing_fails(self, api, capsys):
        assert main(["delete", "3"], client=api) == 1
        assert "Student not found" in capsys.readouterr().err

    def test_clear(self, api, alice, capsys):
        api.create_student(alice)
        assert main(["clear"], client=api) == 0
        assert json.loads(capsys.readouterr().out) == {"detail": "All students deleted successfully."}
