"""NuGet package version model.

NuGet versions extend SemVer 2.0 with an optional fourth numeric component
(``1.0.0.1``) and accept short forms (``1``, ``1.2``). Release-label precedence
follows SemVer, compared case-insensitively; build metadata never affects
equality or ordering.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Optional, Tuple

import semantic_version

_VERSION_RE = re.compile(
    r"^(?P<numbers>\d+(?:\.\d+){0,3})"
    r"(?:-(?P<release>[0-9A-Za-z\-\.]+))?"
    r"(?:\+(?P<metadata>[0-9A-Za-z\-\.]+))?$"
)


class VersionFormatError(ValueError):
    """Raised when a version, float pattern or version range cannot be parsed.

    Attributes:
        text: The offending input.
        item_name: Owning manifest item, attached when raised during manifest resolution.
    """

    def __init__(self, text: Optional[str], reason: str = "", item_name: Optional[str] = None):
        self.text = text
        self.reason = reason
        self.item_name = item_name
        message = f"Invalid version string {text!r}"
        if reason:
            message = f"{message}: {reason}"
        if item_name:
            message = f"{message} (item {item_name!r})"
        super().__init__(message)


def _label_precedence(labels: Tuple[str, ...]) -> semantic_version.Version:
    """Map release labels onto a semver value whose ordering matches NuGet's."""
    if not labels:
        return semantic_version.Version("0.0.0")
    return semantic_version.Version("0.0.0-" + ".".join(label.lower() for label in labels))


@total_ordering
@dataclass(frozen=True, eq=False)
class NuGetVersion:
    """Immutable NuGet version; ``str()`` returns the literal text it was parsed from."""

    major: int
    minor: int = 0
    patch: int = 0
    revision: int = 0
    release_labels: Tuple[str, ...] = ()
    metadata: Optional[str] = None
    original: Optional[str] = field(default=None, repr=False)

    def __post_init__(self):
        for value in (self.major, self.minor, self.patch, self.revision):
            if value < 0:
                raise VersionFormatError(self.original, "numeric components must not be negative")
        try:
            precedence = _label_precedence(self.release_labels)
        except ValueError as exc:
            raise VersionFormatError(self.original, f"invalid release label ({exc})") from exc
        object.__setattr__(self, "_precedence", precedence)

    @classmethod
    def parse(cls, text: str) -> "NuGetVersion":
        """Parse ``major[.minor[.patch[.revision]]][-release][+metadata]``."""
        if text is None:
            raise VersionFormatError(text, "version is required")
        stripped = text.strip()
        match = _VERSION_RE.match(stripped)
        if not match:
            raise VersionFormatError(text)
        numbers = [int(part) for part in match.group("numbers").split(".")]
        numbers.extend([0] * (4 - len(numbers)))
        release = match.group("release")
        labels: Tuple[str, ...] = tuple(release.split(".")) if release else ()
        if any(not label for label in labels):
            raise VersionFormatError(text, "empty release label")
        return cls(
            numbers[0],
            numbers[1],
            numbers[2],
            numbers[3],
            release_labels=labels,
            metadata=match.group("metadata"),
            original=stripped,
        )

    @property
    def release(self) -> str:
        """Dot-joined release label, empty for stable versions."""
        return ".".join(self.release_labels)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.release_labels)

    @property
    def version_text(self) -> str:
        """Numeric component only, as written, without release label or metadata."""
        if self.original:
            return re.split(r"[-+]", self.original, maxsplit=1)[0]
        return self._numbers_text()

    def _numbers_text(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.revision:
            text = f"{text}.{self.revision}"
        return text

    def to_normalized_string(self) -> str:
        """Three-part form (four when revision is set) with label and metadata."""
        text = self._numbers_text()
        if self.release_labels:
            text = f"{text}-{self.release}"
        if self.metadata:
            text = f"{text}+{self.metadata}"
        return text

    def _sort_key(self):
        return (self.major, self.minor, self.patch, self.revision, self._precedence)  # type: ignore[attr-defined]

    def __eq__(self, other):
        if not isinstance(other, NuGetVersion):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other):
        if not isinstance(other, NuGetVersion):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self):
        return hash((self.major, self.minor, self.patch, self.revision,
                     tuple(label.lower() for label in self.release_labels)))

    def __str__(self) -> str:
        return self.original if self.original else self.to_normalized_string()
