"""Concrete collaborator implementations."""

from .codec import YamlJsonCodec
from .cran import CranNameAvailability
from .local import (
    DescriptionMetadataWriter,
    LocalLicenseWriter,
    LocalReadmeWriter,
    LocalSkeletonGenerator,
)
from .shell import GitVersionControl, PkgdownSiteBuilder

__all__ = [
    "CranNameAvailability",
    "DescriptionMetadataWriter",
    "GitVersionControl",
    "LocalLicenseWriter",
    "LocalReadmeWriter",
    "LocalSkeletonGenerator",
    "PkgdownSiteBuilder",
    "YamlJsonCodec",
]
