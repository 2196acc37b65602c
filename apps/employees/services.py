import logging
from typing import List, Optional

import requests
from django.conf import settings

from .models import Employee

logger = logging.getLogger("apps.employees")


class EmployeeServiceError(Exception):
    """A call to the employee REST API failed (transport error or non-2xx)."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class EmployeeNotFound(EmployeeServiceError):
    pass


class EmployeeService:
    """
    Thin client for the employee REST resource.

        GET    {base}/employees          -> list of employees
        GET    {base}/employees/{id}     -> one employee
        POST   {base}/employees          -> created employee
        PUT    {base}/employees/{id}     -> updated employee
        DELETE {base}/employees/{id}     -> plain-text confirmation, ignored

    Every method issues exactly one request and raises EmployeeServiceError
    on failure. No retries.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, session=None):
        self.base_url = (base_url or settings.EMPLOYEE_API_BASE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.EMPLOYEE_API_TIMEOUT
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self):
        """Release the connection pool, unless the session was handed in by the caller."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _url(self, employee_id=None) -> str:
        if employee_id is None:
            return f"{self.base_url}/employees"
        return f"{self.base_url}/employees/{employee_id}"

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        logger.debug("%s %s payload=%s", method, url, kwargs.get('json'))
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("Employee API unreachable: %s %s | %s", method, url, e)
            raise EmployeeServiceError(f"{method} {url} failed: {e}") from e

        if response.status_code == 404:
            logger.error("Employee API 404: %s %s | %s", method, url, response.text)
            raise EmployeeNotFound(response.text or f"{url} not found", status_code=404)
        if not response.ok:
            logger.error("Employee API %s: %s %s | %s", response.status_code, method, url, response.text)
            raise EmployeeServiceError(
                f"{method} {url} returned {response.status_code}",
                status_code=response.status_code,
            )
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def _json(self, response: requests.Response):
        try:
            return response.json()
        except ValueError as e:
            raise EmployeeServiceError(
                f"Invalid JSON from {response.url}: {e}", status_code=response.status_code
            ) from e

    def list_employees(self) -> List[Employee]:
        response = self._request("GET", self._url())
        return [Employee.from_api(item) for item in self._json(response)]

    def get_employee(self, employee_id) -> Employee:
        response = self._request("GET", self._url(employee_id))
        return Employee.from_api(self._json(response))

    def create_employee(self, employee: Employee) -> Employee:
        response = self._request("POST", self._url(), json=employee.to_api())
        created = Employee.from_api(self._json(response))
        logger.info("Created employee id=%s", created.id)
        return created

    def update_employee(self, employee_id, employee: Employee) -> Employee:
        response = self._request("PUT", self._url(employee_id), json=employee.to_api())
        updated = Employee.from_api(self._json(response))
        logger.info("Updated employee id=%s", employee_id)
        return updated

    def delete_employee(self, employee_id) -> None:
        self._request("DELETE", self._url(employee_id))
        logger.info("Deleted employee id=%s", employee_id)
