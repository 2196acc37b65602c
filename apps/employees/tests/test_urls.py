import pytest
from django.urls import resolve, reverse

from apps.employees.views import EmployeeListView, EmployeeFormView, EmployeeDeleteView


@pytest.mark.parametrize("path, view_class, kwargs", [
    ("/", EmployeeListView, {}),
    ("/employees", EmployeeListView, {}),
    ("/add-employee", EmployeeFormView, {}),
    ("/edit-employee/42", EmployeeFormView, {"employee_id": 42}),
    ("/delete-employee/7", EmployeeDeleteView, {"employee_id": 7}),
])
def test_routes_resolve(path, view_class, kwargs):
    match = resolve(path)
    assert match.func.view_class is view_class
    assert match.kwargs == kwargs


def test_named_routes_reverse():
    assert reverse("home") == "/"
    assert reverse("employee-list") == "/employees"
    assert reverse("employee-add") == "/add-employee"
    assert reverse("employee-edit", kwargs={"employee_id": 42}) == "/edit-employee/42"
    assert reverse("employee-delete", kwargs={"employee_id": 7}) == "/delete-employee/7"


def test_non_numeric_id_is_not_routed(client):
    assert client.get("/edit-employee/abc").status_code == 404
