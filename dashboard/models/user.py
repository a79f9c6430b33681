"""
User view model for the dashboard Users page.

The backend speaks PascalCase (``RegistrationNumber``); the page consumes
camelCase (``registrationNumber``). Values pass through untouched.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# view attribute -> upstream key, in page column order
UPSTREAM_FIELDS: dict[str, str] = {
    "registration_number": "RegistrationNumber",
    "name": "Name",
    "title": "Title",
    "phone_number": "PhoneNumber",
    "email": "Email",
    "designation": "Designation",
    "department": "Department",
    "year": "Year",
    "remarks": "Remarks",
    "strikes": "Strikes",
}


class UserModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    registration_number: int
    name: str
    title: Optional[str] = None
    phone_number: int
    email: str
    designation: Optional[str] = None
    department: Optional[str] = None
    year: int
    remarks: Optional[str] = None
    strikes: int

    @classmethod
    def from_upstream(cls, record: Mapping[str, Any]) -> "UserModel":
        """Rename an upstream record's fields without validating its values.

        Keys missing upstream come through as ``None``.
        """
        values = {attr: record.get(key) for attr, key in UPSTREAM_FIELDS.items()}
        # model_construct skips validation so no value is coerced or rejected
        return cls.model_construct(**values)

    def to_page(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
