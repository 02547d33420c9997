"""NuGet version, float pattern and version range models."""

from .version import NuGetVersion, VersionFormatError
from .floating import FloatBehavior, FloatRange
from .version_range import VersionRange
from .models import LibraryDependency, LibraryRange

__all__ = [
    "NuGetVersion",
    "VersionFormatError",
    "FloatBehavior",
    "FloatRange",
    "VersionRange",
    "LibraryRange",
    "LibraryDependency",
]
