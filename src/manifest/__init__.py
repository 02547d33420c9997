"""Manifest (nuspec) group model, resolver and reader.

- models.py: raw and resolved group records, ManifestFormatError
- resolver.py: framework grouping, comma splitting and merge rules
- nuspec.py: nuspec XML to ManifestDocument plus metadata accessors
"""

from .models import (  # noqa: F401
    FrameworkSpecificGroup,
    GroupKind,
    ManifestDocument,
    ManifestFormatError,
    ManifestItem,
    PackageDependency,
    RawGroup,
    ResolvedManifest,
)
from .resolver import ManifestGroupResolver  # noqa: F401
from .nuspec import NuspecReader  # noqa: F401

__all__ = [
    "FrameworkSpecificGroup",
    "GroupKind",
    "ManifestDocument",
    "ManifestFormatError",
    "ManifestItem",
    "PackageDependency",
    "RawGroup",
    "ResolvedManifest",
    "ManifestGroupResolver",
    "NuspecReader",
]
