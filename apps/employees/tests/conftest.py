import json
import logging

import pytest
import requests

from apps.employees import views
from apps.employees.models import Employee
from apps.employees.services import EmployeeServiceError, EmployeeNotFound


class FakeEmployeeService:
    """Stands in for the REST backend; records every call in order."""

    def __init__(self, employees=None):
        self.employees = list(employees or [])
        self.calls = []
        self.failing = set()
        self.base_url = "http://backend.test/api"
        self.open = 0
        self.closed = 0

    def __enter__(self):
        self.open += 1
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed += 1

    def _maybe_fail(self, name):
        if name in self.failing:
            raise EmployeeServiceError(f"{name} failed", status_code=500)

    def list_employees(self):
        self.calls.append(("list_employees",))
        self._maybe_fail("list_employees")
        return list(self.employees)

    def get_employee(self, employee_id):
        self.calls.append(("get_employee", employee_id))
        self._maybe_fail("get_employee")
        for employee in self.employees:
            if employee.id == employee_id:
                return employee
        raise EmployeeNotFound(f"Employee is not exists with the given id : {employee_id}", status_code=404)

    def create_employee(self, employee):
        self.calls.append(("create_employee", employee))
        self._maybe_fail("create_employee")
        created = Employee(id=len(self.employees) + 1, first_name=employee.first_name,
                           last_name=employee.last_name, email=employee.email)
        self.employees.append(created)
        return created

    def update_employee(self, employee_id, employee):
        self.calls.append(("update_employee", employee_id, employee))
        self._maybe_fail("update_employee")
        return Employee(id=employee_id, first_name=employee.first_name,
                        last_name=employee.last_name, email=employee.email)

    def delete_employee(self, employee_id):
        self.calls.append(("delete_employee", employee_id))
        self._maybe_fail("delete_employee")
        self.employees = [e for e in self.employees if e.id != employee_id]

    def called(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def employees():
    return [
        Employee(id=3, first_name="Grace", last_name="Hopper", email="grace@navy.mil"),
        Employee(id=1, first_name="Ada", last_name="Lovelace", email="ada@engine.org"),
        Employee(id=2, first_name="Alan", last_name="Turing", email="alan@bletchley.uk"),
    ]


@pytest.fixture
def fake_service(monkeypatch, employees):
    fake = FakeEmployeeService(employees)
    monkeypatch.setattr(views, "EmployeeService", lambda: fake)
    return fake


@pytest.fixture
def propagate_logs():
    """The app loggers don't propagate to root; caplog needs them to."""
    names = ["apps.employees", "middleware", "diagnostics"]
    loggers = [logging.getLogger(n) for n in names]
    previous = [lg.propagate for lg in loggers]
    for lg in loggers:
        lg.propagate = True
    yield
    for lg, prev in zip(loggers, previous):
        lg.propagate = prev


def make_response(status_code, payload=None, text=None, url="http://backend.test/api/employees"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    else:
        response._content = (text or "").encode("utf-8")
    return response


class StubSession:
    """Minimal requests.Session replacement returning queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []
        self.closed = False

    def close(self):
        self.closed = True

    def request(self, method, url, **kwargs):
        self.requests.append({"method": method, "url": url, **kwargs})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result
