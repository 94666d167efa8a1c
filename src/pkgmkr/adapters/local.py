"""Filesystem backed collaborators writing an R package skeleton."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Optional

from ..interfaces import LicenseWriter, MetadataWriter, ReadmeWriter, SkeletonGenerator
from ..templates import (
    DESCRIPTION_TEMPLATE,
    GITIGNORE_LINES,
    GPL3_LICENSE_MD_TEMPLATE,
    MIT_LICENSE_MD_TEMPLATE,
    MIT_LICENSE_TEMPLATE,
    NAMESPACE_TEMPLATE,
    RBUILDIGNORE_LINES,
    README_TEMPLATE,
    RPROJ_TEMPLATE,
    render,
)
from .description import update_description

__all__ = [
    "DescriptionMetadataWriter",
    "LocalLicenseWriter",
    "LocalReadmeWriter",
    "LocalSkeletonGenerator",
    "append_unique_lines",
    "format_person",
]


LOGGER = logging.getLogger(__name__)


def append_unique_lines(path: Path, lines: Iterable[str]) -> None:
    """Append each of ``lines`` to ``path`` unless it is already present."""

    existing = path.read_text(encoding="utf-8").splitlines() if path.exists() else []
    missing = [line for line in lines if line not in existing]
    if not missing:
        return
    path.write_text("\n".join([*existing, *missing]) + "\n", encoding="utf-8")


def _r_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_person(given: str, family: str, email: Optional[str] = None) -> str:
    """Return an ``Authors@R`` entry naming the author and maintainer."""

    arguments = [_r_string(given), _r_string(family)]
    if email:
        arguments.append(f"email = {_r_string(email)}")
    arguments.append('role = c("aut", "cre")')
    return f"person({', '.join(arguments)})"


class LocalSkeletonGenerator(SkeletonGenerator):
    """Create the minimal layout ``R CMD build`` expects."""

    def create(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=False)
        context = {"package_name": path.name}

        (path / "R").mkdir()
        (path / "DESCRIPTION").write_text(render(DESCRIPTION_TEMPLATE, context), encoding="utf-8")
        (path / "NAMESPACE").write_text(NAMESPACE_TEMPLATE, encoding="utf-8")
        (path / f"{path.name}.Rproj").write_text(RPROJ_TEMPLATE, encoding="utf-8")
        append_unique_lines(path / ".Rbuildignore", RBUILDIGNORE_LINES)
        append_unique_lines(path / ".gitignore", GITIGNORE_LINES)
        LOGGER.debug("skeleton written to %s", path)


class DescriptionMetadataWriter(MetadataWriter):
    def set_author(self, path: Path, given: str, family: str, email: Optional[str] = None) -> None:
        update_description(path, {"Authors@R": format_person(given, family, email)})


class LocalReadmeWriter(ReadmeWriter):
    def create(self, path: Path) -> None:
        readme = path / "README.md"
        if readme.exists():
            raise FileExistsError(f"{readme} already exists")
        readme.write_text(render(README_TEMPLATE, {"package_name": path.name}), encoding="utf-8")


class LocalLicenseWriter(LicenseWriter):
    """Write license files and point the manifest's ``License`` field at them."""

    def __init__(self, year: int | None = None) -> None:
        self._year = year

    def apply(self, license: str, holder: str, path: Path) -> None:
        context = {"year": self._year or date.today().year, "holder": holder}
        if license == "MIT":
            (path / "LICENSE").write_text(render(MIT_LICENSE_TEMPLATE, context), encoding="utf-8")
            (path / "LICENSE.md").write_text(render(MIT_LICENSE_MD_TEMPLATE, context), encoding="utf-8")
            field = "MIT + file LICENSE"
        elif license == "GPL-3":
            (path / "LICENSE.md").write_text(render(GPL3_LICENSE_MD_TEMPLATE, context), encoding="utf-8")
            field = "GPL (>= 3)"
        else:
            raise ValueError(f"unsupported license {license!r}")

        update_description(path, {"License": field})
        append_unique_lines(path / ".Rbuildignore", ["^LICENSE\\.md$"])
