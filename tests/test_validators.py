import pytest

from users_api.validators import is_email


@pytest.mark.parametrize(
    "email",
    ["a@b.com", "a@b.co", "first.last+tag@sub.example.org", "x_y%z-1@host-name.io"],
)
def test_valid_emails(email):
    assert is_email(email)


@pytest.mark.parametrize(
    "email",
    [
        "not-an-email",
        "a@b",
        "a@b.c",
        "@b.com",
        "a@.",
        "a b@c.com",
        "a@b.com\n",
        "a@b.c0m",
        "",
    ],
)
def test_invalid_emails(email):
    assert not is_email(email)


def test_non_string_is_not_an_email():
    assert not is_email(None)
    assert not is_email(42)
