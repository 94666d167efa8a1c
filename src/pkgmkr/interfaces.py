"""Abstract interfaces for the tools a package creation run drives.

Every collaborator receives the package location explicitly; none of them may
rely on, or change, the process working directory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional


class SkeletonGenerator(ABC):
    """Creates the base directory, manifest and namespace files."""

    @abstractmethod
    def create(self, path: Path) -> None:
        """Create a new package skeleton at ``path``."""


class MetadataWriter(ABC):
    """Writes author information into the package manifest."""

    @abstractmethod
    def set_author(self, path: Path, given: str, family: str, email: Optional[str] = None) -> None:
        """Record the author (and optional email) of the package at ``path``."""


class ReadmeWriter(ABC):
    @abstractmethod
    def create(self, path: Path) -> None:
        """Write a README for the package at ``path``."""


class LicenseWriter(ABC):
    @abstractmethod
    def apply(self, license: str, holder: str, path: Path) -> None:
        """Apply ``license`` with ``holder`` as copyright holder."""


class VersionControl(ABC):
    """Local repository initialisation and hosted remote creation."""

    @abstractmethod
    def init(self, path: Path) -> None:
        """Initialise an empty repository at ``path``."""

    @abstractmethod
    def commit(self, path: Path, message: str) -> None:
        """Stage everything under ``path`` and commit it."""

    @abstractmethod
    def configure(self, path: Path, username: Optional[str], email: Optional[str]) -> None:
        """Set repository scoped identity settings."""

    @abstractmethod
    def create_remote(self, path: Path) -> None:
        """Create a hosted repository for ``path`` and push to it."""


class DocSiteBuilder(ABC):
    @abstractmethod
    def setup(self, path: Path) -> None:
        """Write the documentation site configuration."""

    @abstractmethod
    def build(self, path: Path) -> None:
        """Render the documentation site."""


class NameAvailability(ABC):
    @abstractmethod
    def check(self, name: str) -> bool:
        """Return ``True`` when ``name`` is not yet taken."""


class ConfigCodec(ABC):
    """Turns configuration text into mappings and back."""

    @abstractmethod
    def decode(self, text: str, format: str) -> Any:
        """Decode ``text`` written in ``format``.

        Malformed text raises :class:`ValueError` (or a :mod:`yaml` error).
        """

    @abstractmethod
    def encode(self, document: Mapping[str, Any], format: str) -> str:
        """Encode ``document`` as ``format`` text."""


__all__ = [
    "ConfigCodec",
    "DocSiteBuilder",
    "LicenseWriter",
    "MetadataWriter",
    "NameAvailability",
    "ReadmeWriter",
    "SkeletonGenerator",
    "VersionControl",
]
