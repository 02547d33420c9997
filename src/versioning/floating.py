"""Floating version patterns (``1.0.*``, ``1.*``, ``*``, ``1.0.0-beta*``)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .version import NuGetVersion, VersionFormatError


class FloatBehavior(Enum):
    """Which component of a version floats to the highest available value."""
    NONE = "none"
    PRERELEASE = "prerelease"
    REVISION = "revision"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"


# Number of fixed numeric components in front of a trailing ".*".
_NUMERIC_FLOATS = {
    1: FloatBehavior.MINOR,
    2: FloatBehavior.PATCH,
    3: FloatBehavior.REVISION,
}


@dataclass(frozen=True)
class FloatRange:
    """A minimum version plus the component allowed to float above it."""

    float_behavior: FloatBehavior
    min_version: NuGetVersion
    release_prefix: str = ""
    original: Optional[str] = field(default=None, compare=False, repr=False)

    @classmethod
    def parse(cls, text: str) -> "FloatRange":
        """Parse a float pattern; text without ``*`` yields a non-floating range."""
        if text is None or not text.strip():
            raise VersionFormatError(text, "float pattern is empty")
        pattern = text.strip()

        if "*" not in pattern:
            return cls(FloatBehavior.NONE, NuGetVersion.parse(pattern), original=pattern)

        if pattern == "*":
            return cls(FloatBehavior.MAJOR, NuGetVersion(0, original="0.0.0"), original=pattern)

        if "-" in pattern:
            numbers, label = pattern.split("-", 1)
            if "*" in numbers or not label.endswith("*") or label.count("*") != 1:
                raise VersionFormatError(text, "wildcard must be the last character")
            prefix = label[:-1]
            min_label = prefix.rstrip(".") or "0"
            min_version = NuGetVersion.parse(f"{numbers}-{min_label}")
            return cls(FloatBehavior.PRERELEASE, min_version, release_prefix=prefix, original=pattern)

        if not pattern.endswith(".*") or pattern.count("*") != 1:
            raise VersionFormatError(text, "wildcard must replace a whole trailing component")
        fixed = pattern[:-2].split(".")
        behavior = _NUMERIC_FLOATS.get(len(fixed))
        if behavior is None:
            raise VersionFormatError(text, "too many components in float pattern")
        if not all(part.isdigit() for part in fixed):
            raise VersionFormatError(text, "non-numeric component in float pattern")
        padded = fixed + ["0"] * (3 - len(fixed))
        return cls(behavior, NuGetVersion.parse(".".join(padded)), original=pattern)

    @property
    def is_floating(self) -> bool:
        return self.float_behavior is not FloatBehavior.NONE

    def satisfies(self, version: NuGetVersion) -> bool:
        """Return True when version matches the fixed part of the pattern."""
        low = self.min_version
        behavior = self.float_behavior
        if behavior is FloatBehavior.NONE:
            return version == low
        if behavior is FloatBehavior.PRERELEASE:
            same_numbers = (version.major, version.minor, version.patch, version.revision) == (
                low.major, low.minor, low.patch, low.revision)
            return same_numbers and version.release.lower().startswith(self.release_prefix.lower())
        if version.is_prerelease:
            return False
        if behavior is FloatBehavior.MAJOR:
            return True
        if behavior is FloatBehavior.MINOR:
            return version.major == low.major
        if behavior is FloatBehavior.PATCH:
            return (version.major, version.minor) == (low.major, low.minor)
        return (version.major, version.minor, version.patch) == (low.major, low.minor, low.patch)

    def __str__(self) -> str:
        if self.original:
            return self.original
        low = self.min_version
        behavior = self.float_behavior
        if behavior is FloatBehavior.PRERELEASE:
            return f"{low.version_text}-{self.release_prefix}*"
        if behavior is FloatBehavior.MAJOR:
            return "*"
        if behavior is FloatBehavior.MINOR:
            return f"{low.major}.*"
        if behavior is FloatBehavior.PATCH:
            return f"{low.major}.{low.minor}.*"
        if behavior is FloatBehavior.REVISION:
            return f"{low.major}.{low.minor}.{low.patch}.*"
        return str(low)
