"""Scaffold new R packages from a handful of parameters.

The package validates the author, email, license and target path up front,
then creates the package skeleton, writes the author metadata, and optionally
adds a README, license files, a git repository with a hosted remote, and a
pkgdown site. The same run can be driven from a YAML or JSON configuration
file.
"""

from __future__ import annotations

from .config import create_from_config, read_config, write_config
from .errors import PkgmkrError, StepWarning, ValidationError
from .naming import parse_author
from .orchestrator import PackageOrchestrator, Toolchain, create_package
from .schema import CreationResult, License, PackageRequest
from .validation import validate

__all__ = [
    "CreationResult",
    "License",
    "PackageOrchestrator",
    "PackageRequest",
    "PkgmkrError",
    "StepWarning",
    "Toolchain",
    "ValidationError",
    "create_from_config",
    "create_package",
    "parse_author",
    "read_config",
    "validate",
    "write_config",
]

__version__ = "0.1.0"
