"""Field validation shared by the users service and the console.

The checks are deliberately shallow: an email only has to look like
``local@domain.tld``. Full RFC 5322 parsing is not attempted.

Messages returned by :func:`validate_user_fields` are the ones shown next to
form fields and inside the service's 400 responses:

        name   -> "Name is required"
        email  -> "Email is required"
                  "Please enter a valid email address"
"""

from __future__ import annotations

import html
import re
from typing import Dict

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_REQUIRED = "Name is required"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Please enter a valid email address"


def is_not_empty(value: str | None) -> bool:
    """True when the value has at least one non-whitespace character."""
    if value is None:
        return False
    return len(value.strip()) > 0


def is_valid_email(email: str | None) -> bool:
    if email is None:
        return False
    return EMAIL_PATTERN.match(email.strip()) is not None


def validate_user_fields(name: str | None, email: str | None) -> Dict[str, str]:
    """Return a field -> message mapping; empty when both fields are valid."""
    errors: Dict[str, str] = {}

    if not is_not_empty(name):
        errors["name"] = NAME_REQUIRED

    if not is_not_empty(email):
        errors["email"] = EMAIL_REQUIRED
    elif not is_valid_email(email):
        errors["email"] = EMAIL_INVALID

    return errors


def sanitize_input(value: str) -> str:
    """Escape text so it can be embedded in HTML output without being parsed."""
    return html.escape(value, quote=True)
