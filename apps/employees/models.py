"""
Employee records as the front-end sees them.

Nothing here is persisted locally: the REST backend owns every record and
this module only maps its camelCase JSON to Python and back.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Employee:
    id: Optional[int]
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_api(cls, payload: dict) -> "Employee":
        return cls(
            id=payload.get("id"),
            first_name=payload.get("firstName") or "",
            last_name=payload.get("lastName") or "",
            email=payload.get("email") or "",
        )

    def to_api(self) -> dict:
        """Request body for create/update. The id is left out until the server assigns one."""
        body = {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
        }
        if self.id is not None:
            body["id"] = self.id
        return body
