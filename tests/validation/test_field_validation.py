import pytest

from showcase.validation import (
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    NAME_REQUIRED,
    is_not_empty,
    is_valid_email,
    sanitize_input,
    validate_user_fields,
)


@pytest.mark.parametrize(
    "value,expected",
    [("Ada", True), ("  a  ", True), ("", False), ("   \t\n", False), (None, False)],
)
def test_is_not_empty(value, expected):
    assert is_not_empty(value) is expected


@pytest.mark.parametrize(
    "email,expected",
    [
        ("ada@example.com", True),
        ("  ada@example.com ", True),
        ("a.b+c@sub.example.org", True),
        ("notanemail", False),
        ("ada@example", False),
        ("@example.com", False),
        ("ada @example.com", False),
        ("ada@@example.com", False),
        ("", False),
    ],
)
def test_is_valid_email(email, expected):
    assert is_valid_email(email) is expected


def test_validate_user_fields_accepts_valid_pair():
    assert validate_user_fields("Ada", "ada@example.com") == {}


def test_validate_user_fields_reports_each_field():
    assert validate_user_fields(" ", "") == {
        "name": NAME_REQUIRED,
        "email": EMAIL_REQUIRED,
    }
    assert validate_user_fields("Ada", "ada") == {"email": EMAIL_INVALID}


def test_sanitize_input_escapes_markup():
    assert sanitize_input('<b onclick="x">&</b>') == (
        "&lt;b onclick=&quot;x&quot;&gt;&amp;&lt;/b&gt;"
    )
