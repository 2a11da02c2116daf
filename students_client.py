"""Student Records API client.

This module wraps the student REST API with a small ``requests`` based
client and a command line front end.  It covers the same actions as the
browser page that originally shipped with the service: show all
students, add one, edit one, delete one and clear the whole list.

The client exposes one method per operation:

* :meth:`StudentsAPI.list_students` – all students sorted by id.
* :meth:`StudentsAPI.get_student` – one student by id.
* :meth:`StudentsAPI.create_student` – add a student; the server assigns the id.
* :meth:`StudentsAPI.update_student` – replace a student.
* :meth:`StudentsAPI.delete_student` – delete a student.
* :meth:`StudentsAPI.clear_students` – delete every student.

Methods never raise on HTTP errors.  Each returns a tuple
``(data, error)`` where ``error`` is ``None`` on success or a dict with
``status_code`` and ``message`` keys.

Command line usage::

    python students_client.py list
    python students_client.py add --name Alice --registration-number R1 --courses CS101,CS102 --project-group G1
    python students_client.py update 1 --name "Alice B."
    python students_client.py delete 1
    python students_client.py clear

``update`` fetches the current record first and only changes the
fields passed on the command line, the same way the browser page
pre‑filled its edit form.

The base URL defaults to ``STUDENTS_API_URL`` or ``http://localhost:8080``.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"
STUDENTS_PATH = "/students"

Error = Dict[str, Any]


class StudentsAPI:
    """Client for the student records API."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the decoded JSON
            body (``None`` for empty bodies) and ``error`` is ``None``
            on success.  On failure ``data`` is ``None`` and ``error``
            describes the problem.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method, url, json=json_body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = ""
            try:
                err_json = response.json()
                if isinstance(err_json, dict):
                    message = err_json.get("detail") or err_json.get("message") or ""
                if not message:
                    message = str(err_json)
            except ValueError:
                message = response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Student operations
    # ------------------------------------------------------------------
    def list_students(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every student, sorted by id."""
        data, error = self._request("GET", STUDENTS_PATH)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_student(self, student_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{STUDENTS_PATH}/{student_id}")

    def create_student(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add a student.  The returned record carries the assigned id."""
        return self._request("POST", STUDENTS_PATH, json_body=payload)

    def update_student(
        self, student_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace a student.  Fields missing from ``payload`` become ``null``."""
        return self._request("PUT", f"{STUDENTS_PATH}/{student_id}", json_body=payload)

    def delete_student(self, student_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"{STUDENTS_PATH}/{student_id}")
        return error is None, error

    def clear_students(self) -> Tuple[Optional[str], Optional[Error]]:
        """Delete every student.  Returns the server's confirmation text."""
        data, error = self._request("DELETE", STUDENTS_PATH)
        if error:
            return None, error
        return (data or {}).get("detail"), None


# ----------------------------------------------------------------------
# Command line interface
# ----------------------------------------------------------------------
def parse_courses(raw: Optional[str]) -> List[str]:
    """Split a comma separated course list, dropping blank entries."""
    if not raw:
        return []
    return [course.strip() for course in raw.split(",") if course.strip()]


def _payload_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "name": args.name,
        "registrationNumber": args.registration_number,
        "courses": parse_courses(args.courses),
        "projectGroup": args.project_group,
    }


def _overlay_args(record: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Apply the flags that were actually given on top of a stored record.

    The API replaces whole records, so an edit starts from the current
    values and only changes what the user asked for.
    """
    payload = {key: value for key, value in record.items() if key != "id"}
    if args.name is not None:
        payload["name"] = args.name
    if args.registration_number is not None:
        payload["registrationNumber"] = args.registration_number
    if args.courses is not None:
        payload["courses"] = parse_courses(args.courses)
    if args.project_group is not None:
        payload["projectGroup"] = args.project_group
    return payload


def _update_from_args(api: StudentsAPI, args: argparse.Namespace) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
    current, error = api.get_student(args.student_id)
    if error:
        return None, error
    return api.update_student(args.student_id, _overlay_args(current or {}, args))


def _add_student_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--name")
    parser.add_argument("--registration-number")
    parser.add_argument("--courses", help="Comma separated course names")
    parser.add_argument("--project-group")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage records in a Student Records API service")
    parser.add_argument(
        "--base-url",
        default=os.getenv("STUDENTS_API_URL", DEFAULT_BASE_URL),
        help="Service base URL (default: $STUDENTS_API_URL or %(default)s)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Show all students")

    get_p = sub.add_parser("get", help="Show one student")
    get_p.add_argument("student_id", type=int)

    add_p = sub.add_parser("add", help="Add a student")
    _add_student_fields(add_p)

    update_p = sub.add_parser("update", help="Edit a student; fields not given keep their values")
    update_p.add_argument("student_id", type=int)
    _add_student_fields(update_p)

    delete_p = sub.add_parser("delete", help="Delete a student")
    delete_p.add_argument("student_id", type=int)

    sub.add_parser("clear", help="Delete all students")
    return parser


def main(argv: Optional[Sequence[str]] = None, *, client: Optional[StudentsAPI] = None) -> int:
    """Run the command line client and return the process exit status."""
    args = build_parser().parse_args(argv)
    api = client or StudentsAPI(base_url=args.base_url)

    if args.command == "list":
        result, error = api.list_students()
    elif args.command == "get":
        result, error = api.get_student(args.student_id)
    elif args.command == "add":
        result, error = api.create_student(_payload_from_args(args))
    elif args.command == "update":
        result, error = _update_from_args(api, args)
    elif args.command == "delete":
        _, error = api.delete_student(args.student_id)
        result = {"deleted": args.student_id}
    else:
        message, error = api.clear_students()
        result = {"detail": message}

    if error:
        print(f"Error: {error['message']}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    sys.exit(main())
