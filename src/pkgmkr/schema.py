"""Request and result models for package creation."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import InvalidArgument
from .naming import parse_author, resolve_target
from .validation import validate


class License(str, Enum):
    """Licenses the scaffolder knows how to apply."""

    MIT = "MIT"
    GPL3 = "GPL-3"


class PackageRequest(BaseModel):
    """Validated intent to create one package."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Path = Field(..., description="Absolute, normalised target location.")
    package_name: str = Field(..., description="Final segment of the target path.")
    author: str = Field(..., description="Display name of the author, at least two tokens.")
    email: Optional[str] = Field(None, description="Optional author email address.")
    license: License = Field(default=License.MIT, description="License applied to the package.")
    git: bool = Field(default=True, description="Initialise a git repository.")
    git_username: Optional[str] = Field(None, description="Project scoped git user.name.")
    git_email: Optional[str] = Field(None, description="Project scoped git user.email.")
    readme_md: bool = Field(default=True, description="Create a README.md.")
    check_pkg_name: bool = Field(default=True, description="Run the advisory name availability check.")
    pkgdown: bool = Field(default=True, description="Set up and build a pkgdown site.")

    @classmethod
    def build(
        cls,
        path: str | Path | None,
        author: str | None,
        email: str | None = None,
        *,
        license: str = "MIT",
        **options: object,
    ) -> "PackageRequest":
        """Validate the raw inputs and return a request for them.

        Raises a :class:`~pkgmkr.errors.ValidationError` subclass for the first
        failing check, and :class:`~pkgmkr.errors.InvalidArgument` when an
        option has the wrong type; nothing on disk is inspected apart from
        resolving the path.
        """

        package_name = validate(path, author, email, license)
        try:
            return cls(
                path=resolve_target(path),
                package_name=package_name,
                author=" ".join(author.split()),
                email=email or None,
                license=License(license),
                **options,
            )
        except PydanticValidationError as error:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
                for detail in error.errors()
            )
            raise InvalidArgument(f"invalid package options: {problems}") from error

    @property
    def author_given(self) -> str:
        return parse_author(self.author)[0]

    @property
    def author_family(self) -> str:
        return parse_author(self.author)[1]


class CreationResult(BaseModel):
    """Outcome of a successful run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Path = Field(..., description="Location of the created package.")
    package_name: str = Field(..., description="Name of the created package.")
    success: bool = Field(default=True, description="Always true; failures raise instead.")
    warnings: List[str] = Field(default_factory=list, description="Messages from optional steps that failed.")


__all__ = ["CreationResult", "License", "PackageRequest"]
