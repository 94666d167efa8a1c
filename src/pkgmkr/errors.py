"""Exception types raised while creating a package."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

__all__ = [
    "AdapterError",
    "ConfigEmpty",
    "ConfigError",
    "ConfigNotFound",
    "ConfigParseError",
    "CreationFailed",
    "DirectoryExists",
    "InvalidArgument",
    "InvalidAuthor",
    "InvalidEmail",
    "InvalidPackageName",
    "MetadataWriteFailed",
    "MissingRequiredField",
    "PkgmkrError",
    "SkeletonCreationFailed",
    "StepWarning",
    "UnsupportedConfigFormat",
    "UnsupportedLicense",
    "ValidationError",
]


class PkgmkrError(Exception):
    """Base class for every error surfaced to callers."""


class AdapterError(PkgmkrError):
    """Raised when a collaborator cannot fulfil a request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ValidationError(PkgmkrError, ValueError):
    """An input failed a structural check before any side effect."""


class InvalidArgument(ValidationError):
    pass


class InvalidPackageName(ValidationError):
    pass


class InvalidAuthor(ValidationError):
    pass


class InvalidEmail(ValidationError):
    pass


class UnsupportedLicense(ValidationError):
    pass


class DirectoryExists(PkgmkrError):
    """The target path is already occupied."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"directory already exists: {path}")


class ConfigError(PkgmkrError):
    """Base class for configuration loading failures."""


class ConfigNotFound(ConfigError):
    pass


class ConfigParseError(ConfigError):
    pass


class ConfigEmpty(ConfigError):
    pass


class UnsupportedConfigFormat(ConfigError):
    pass


class MissingRequiredField(ConfigError):
    """One or more required configuration keys are absent."""

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = tuple(fields)
        names = ", ".join(self.fields)
        super().__init__(f"config is missing required field(s): {names}")


class CreationFailed(PkgmkrError):
    """A step without a fallback failed and the run was aborted."""

    step = "creation"

    def __init__(self, package_name: str, cause: BaseException) -> None:
        self.package_name = package_name
        self.cause = cause
        super().__init__(
            f"failed to create package '{package_name}' during {self.step}: {cause}. "
            "A partially created directory may need to be removed manually."
        )


class SkeletonCreationFailed(CreationFailed):
    step = "skeleton creation"


class MetadataWriteFailed(CreationFailed):
    step = "metadata write"


class StepWarning(UserWarning):
    """Emitted when an optional step fails and the run carries on."""

    def __init__(self, step: str, cause: BaseException | str) -> None:
        self.step = step
        self.cause = cause
        super().__init__(f"{step} step failed: {cause}")
