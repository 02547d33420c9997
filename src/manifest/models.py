"""Data models for manifest groups, before and after resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, Tuple, TypeVar

from frameworks import FrameworkIdentity
from versioning import VersionRange


class ManifestFormatError(ValueError):
    """Raised for structurally invalid manifests.

    Attributes:
        element: Name of the offending element.
    """

    def __init__(self, message: str, element: Optional[str] = None):
        self.element = element
        if element:
            message = f"{message} (element <{element}>)"
        super().__init__(message)


class GroupKind(Enum):
    """Group kinds a manifest can declare."""
    DEPENDENCY = "dependency"
    REFERENCE = "reference"
    FRAMEWORK_ASSEMBLY = "frameworkAssembly"


@dataclass(frozen=True)
class ManifestItem:
    """A raw item record: dependency id, reference file or assembly name."""
    name: str
    version: Optional[str] = None


@dataclass(frozen=True)
class RawGroup:
    """One group element as written, with its unparsed framework attribute."""
    kind: GroupKind
    target_framework: Optional[str]
    items: Tuple[ManifestItem, ...] = ()


@dataclass(frozen=True)
class ManifestDocument:
    """Manifest groups of all kinds in document order, as produced by a reader."""
    groups: Tuple[RawGroup, ...] = ()

    def groups_of(self, kind: GroupKind) -> Tuple[RawGroup, ...]:
        return tuple(group for group in self.groups if group.kind is kind)


@dataclass(frozen=True)
class PackageDependency:
    """A resolved package dependency; no range means any version."""
    id: str
    version_range: Optional[VersionRange] = None

    def __str__(self) -> str:
        if self.version_range is None:
            return self.id
        return f"{self.id} {self.version_range}"


T = TypeVar("T")


@dataclass(frozen=True)
class FrameworkSpecificGroup(Generic[T]):
    """Items scoped to a single target framework."""
    target_framework: FrameworkIdentity
    items: Tuple[T, ...] = ()


@dataclass(frozen=True)
class ResolvedManifest:
    """Resolver output: one ordered group list per group kind."""
    dependency_groups: Tuple[FrameworkSpecificGroup, ...] = field(default_factory=tuple)
    reference_groups: Tuple[FrameworkSpecificGroup, ...] = field(default_factory=tuple)
    framework_assembly_groups: Tuple[FrameworkSpecificGroup, ...] = field(default_factory=tuple)
