"""Name handling shared by validation and the orchestrator."""

from __future__ import annotations

import re
from pathlib import Path

from .errors import InvalidAuthor

__all__ = [
    "EMAIL_PATTERN",
    "PACKAGE_NAME_PATTERN",
    "is_valid_email",
    "is_valid_package_name",
    "package_name_from_path",
    "parse_author",
    "resolve_target",
]


# Both patterns are applied with fullmatch so a trailing newline never passes.
# A single letter is a valid name, otherwise letters/digits/dots not ending in a dot.
PACKAGE_NAME_PATTERN = re.compile(r"[A-Za-z]|[A-Za-z][A-Za-z0-9.]*[A-Za-z0-9]")
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


def resolve_target(path: str | Path) -> Path:
    """Return the absolute, symlink-free location a package at ``path`` lands in."""

    return Path(str(path)).expanduser().resolve()


def package_name_from_path(path: str | Path) -> str:
    """Return the final segment of ``path``, ignoring trailing separators."""

    return Path(str(path).rstrip("/\\")).name


def is_valid_package_name(name: str) -> bool:
    return isinstance(name, str) and PACKAGE_NAME_PATTERN.fullmatch(name) is not None


def is_valid_email(email: str) -> bool:
    return isinstance(email, str) and EMAIL_PATTERN.fullmatch(email) is not None


def parse_author(author: str | None) -> tuple[str, str]:
    """Split ``author`` into ``(given, family)``.

    The first whitespace separated token is the given name; every remaining
    token is joined with a single space to form the family name, so
    ``"Mary Jane Smith Wilson"`` becomes ``("Mary", "Jane Smith Wilson")``.

    Raises
    ------
    InvalidAuthor
        When ``author`` is empty or holds a single token.
    """

    if author is not None and not isinstance(author, str):
        raise InvalidAuthor(f"author must be a string, got {type(author).__name__}")
    tokens = (author or "").split()
    if not tokens:
        raise InvalidAuthor("author cannot be empty")
    if len(tokens) < 2:
        raise InvalidAuthor(
            f"author must contain at least a first and last name, got {author.strip()!r}"
        )
    given, *family = tokens
    return given, " ".join(family)
