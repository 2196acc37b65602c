from dataclasses import dataclass
from typing import Optional, Union

from django import forms
from django.conf import settings

from config.constants import (
    MSG_FIRST_NAME_REQUIRED, MSG_LAST_NAME_REQUIRED, MSG_EMAIL_REQUIRED,
    MSG_FORM_HEADING_ADD, MSG_FORM_HEADING_UPDATE,
)
from .models import Employee


@dataclass(frozen=True)
class CreateMode:
    heading = MSG_FORM_HEADING_ADD


@dataclass(frozen=True)
class EditMode:
    employee_id: int
    heading = MSG_FORM_HEADING_UPDATE


FormMode = Union[CreateMode, EditMode]


def form_mode(employee_id: Optional[int]) -> FormMode:
    """Edit when the route carried an id, Create otherwise."""
    if employee_id is None:
        return CreateMode()
    return EditMode(employee_id=employee_id)


class EmployeeForm(forms.Form):
    """Presence-only validation: every field must be non-blank once trimmed."""
    first_name = forms.CharField(
        label="First Name",
        error_messages={'required': MSG_FIRST_NAME_REQUIRED},
        widget=forms.TextInput(attrs={'placeholder': 'Enter Employee First Name'}),
    )
    last_name = forms.CharField(
        label="Last Name",
        error_messages={'required': MSG_LAST_NAME_REQUIRED},
        widget=forms.TextInput(attrs={'placeholder': 'Enter Employee Last Name'}),
    )
    # Plain text on purpose: no format check on the address.
    email = forms.CharField(
        label="Email Id",
        error_messages={'required': MSG_EMAIL_REQUIRED},
        widget=forms.TextInput(attrs={'placeholder': 'Enter Employee Email Id'}),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.widget.attrs.update({'class': 'form-control'})

    @classmethod
    def from_employee(cls, employee: Employee):
        return cls(initial={
            'first_name': employee.first_name,
            'last_name': employee.last_name,
            'email': employee.email,
        })

    def to_employee(self) -> Employee:
        data = self.cleaned_data
        return Employee(
            id=None,
            first_name=data['first_name'],
            last_name=data['last_name'],
            email=data['email'],
        )

    def feedback(self, name: str) -> str:
        """
        Error text to print under the input, or '' when nothing is shown.

        By default the message is only shown while the field holds a
        non-blank value, which means required-field errors stay hidden and
        only the input's is-invalid styling flags them. Setting
        EMPLOYEE_FORM_SHOW_ERRORS_WHEN_BLANK shows them for blank fields.
        """
        errors = self.errors.get(name) if self.is_bound else None
        if not errors:
            return ''
        value = self[name].value()
        filled = bool(str(value or '').strip())
        if settings.EMPLOYEE_FORM_SHOW_ERRORS_WHEN_BLANK:
            return '' if filled else errors[0]
        return errors[0] if filled else ''

    def rows(self):
        return [
            {'field': self[name], 'feedback': self.feedback(name)}
            for name in self.fields
        ]
