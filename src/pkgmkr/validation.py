"""Side-effect free checks run before any package is created."""

from __future__ import annotations

from pathlib import Path

from .errors import (
    InvalidArgument,
    InvalidEmail,
    InvalidPackageName,
    UnsupportedLicense,
)
from .naming import (
    is_valid_email,
    is_valid_package_name,
    package_name_from_path,
    parse_author,
    resolve_target,
)

__all__ = [
    "LICENSES",
    "check_author",
    "check_email",
    "check_license",
    "check_package_name",
    "check_path",
    "validate",
]


LICENSES = ("MIT", "GPL-3")


def check_path(path: str | Path | None) -> str:
    """Return ``path`` as a string, rejecting missing or blank values."""

    text = "" if path is None else str(path)
    if not text.strip():
        raise InvalidArgument("path must be provided and cannot be empty")
    return text


def check_package_name(path: str | Path) -> str:
    """Return the name of the directory ``path`` resolves to, if it is valid.

    Symlinks are followed so the name always matches the directory that is
    actually created.
    """

    name = package_name_from_path(resolve_target(path))
    if not is_valid_package_name(name):
        raise InvalidPackageName(
            f"Invalid package name {name!r}: it must start with a letter, contain only "
            "letters, numbers and dots, and not end with a dot"
        )
    return name


def check_license(license: str | None) -> str:
    if license not in LICENSES:
        allowed = ", ".join(repr(item) for item in LICENSES)
        raise UnsupportedLicense(f"license must be one of {allowed}, got {license!r}")
    return license


def check_author(author: str | None) -> tuple[str, str]:
    return parse_author(author)


def check_email(email: str | None) -> None:
    if email is None or email == "":
        return
    if not isinstance(email, str):
        raise InvalidEmail(f"email must be a string, got {type(email).__name__}")
    if not is_valid_email(email):
        raise InvalidEmail(f"email must be a valid email address, got {email!r}")


def validate(
    path: str | Path | None,
    author: str | None,
    email: str | None = None,
    license: str | None = "MIT",
) -> str:
    """Run every input check in a fixed order and return the package name.

    The order is path, package name, license, author, email; the first failing
    check raises its :class:`~pkgmkr.errors.ValidationError` subclass.
    """

    text = check_path(path)
    name = check_package_name(text)
    check_license(license)
    check_author(author)
    check_email(email)
    return name
