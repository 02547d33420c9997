"""Library references built on top of version ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .version_range import VersionRange


@dataclass(frozen=True)
class LibraryRange:
    """A named dependency constraint; a missing range accepts any version."""
    name: str
    version_range: Optional[VersionRange] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("library name must not be empty")

    def to_library_string(self) -> str:
        """Canonical ``"Name >= min< max"`` form compared against lock files."""
        if self.version_range is None:
            return f"{self.name} "
        return self.version_range.to_library_string(self.name)

    def __str__(self) -> str:
        if self.version_range is None:
            return self.name
        return f"{self.name} {self.version_range}"


@dataclass(frozen=True)
class LibraryDependency:
    """A declared dependency of a project."""
    library_range: LibraryRange
    type: str = "default"  # "default" | "build" | "platform"

    @property
    def name(self) -> str:
        return self.library_range.name
