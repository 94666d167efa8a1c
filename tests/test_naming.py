from __future__ import annotations

import pytest

from pkgmkr.errors import InvalidAuthor
from pkgmkr.naming import (
    is_valid_email,
    is_valid_package_name,
    package_name_from_path,
    parse_author,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("testpkg", True),
        ("my.pkg", True),
        ("pkg2", True),
        ("x", True),
        ("123bad", False),
        ("bad-name", False),
        ("bad.", False),
        ("bad_name", False),
        ("", False),
        ("pkg\n", False),
        ("\npkg", False),
    ],
)
def test_is_valid_package_name(name, expected):
    assert is_valid_package_name(name) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("/tmp/work/testpkg", "testpkg"),
        ("/tmp/work/testpkg/", "testpkg"),
        ("testpkg", "testpkg"),
        ("relative/dir/my.pkg", "my.pkg"),
    ],
)
def test_package_name_from_path(value, expected):
    assert package_name_from_path(value) == expected


@pytest.mark.parametrize(
    "email, expected",
    [
        ("jane@example.com", True),
        ("first.last+tag@sub.example.org", True),
        ("not-an-email", False),
        ("@example.com", False),
        ("jane@example", False),
        ("jane doe@example.com", False),
        ("jane@example.com\n", False),
        (12345, False),
    ],
)
def test_is_valid_email(email, expected):
    assert is_valid_email(email) is expected


def test_parse_author_splits_given_and_family():
    assert parse_author("Jane Doe") == ("Jane", "Doe")
    assert parse_author("Mary Jane Smith Wilson") == ("Mary", "Jane Smith Wilson")


def test_parse_author_collapses_whitespace():
    assert parse_author("  Mary \t Jane   Smith ") == ("Mary", "Jane Smith")


def test_parse_author_rejects_empty_input():
    with pytest.raises(InvalidAuthor, match="cannot be empty"):
        parse_author("   ")
    with pytest.raises(InvalidAuthor, match="cannot be empty"):
        parse_author(None)


def test_parse_author_rejects_single_token():
    with pytest.raises(InvalidAuthor, match="at least a first and last name"):
        parse_author("Solo")


def test_parse_author_rejects_non_strings():
    with pytest.raises(InvalidAuthor, match="must be a string"):
        parse_author(42)
