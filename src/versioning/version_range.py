"""Version range model with NuGet interval syntax and floating lower bounds.

Accepted forms::

    1.0              minimum version, inclusive
    [1.0]            exactly 1.0
    [1.0, 2.0)       1.0 <= v < 2.0
    (, 2.0]          v <= 2.0
    1.0.*            floating minimum (also as the lower bound: [1.0.*, 2.0))

``to_library_string`` renders the runtime-style ``"Name >= min< max"`` form
that lock files store; ``str()`` renders the bracket form that parses back to
an equal range.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .floating import FloatBehavior, FloatRange
from .version import NuGetVersion, VersionFormatError

logger = logging.getLogger(__name__)

_OPEN = "[("
_CLOSE = "])"


@dataclass(frozen=True)
class VersionRange:
    """Immutable version interval. Equality is structural over every bound field."""

    min_version: Optional[NuGetVersion] = None
    max_version: Optional[NuGetVersion] = None
    is_min_inclusive: bool = False
    is_max_inclusive: bool = False
    float_range: Optional[FloatRange] = None

    def __post_init__(self):
        float_range = self.float_range
        if float_range is not None and not float_range.is_floating:
            float_range = None
            object.__setattr__(self, "float_range", None)
        if float_range is not None:
            # Floating ranges always start at the pattern's minimum, inclusive.
            object.__setattr__(self, "min_version", float_range.min_version)
            object.__setattr__(self, "is_min_inclusive", True)
        if self.min_version is None:
            object.__setattr__(self, "is_min_inclusive", False)
        if self.max_version is None:
            object.__setattr__(self, "is_max_inclusive", False)

        low, high = self.min_version, self.max_version
        if low is not None and high is not None:
            if high < low:
                raise ValueError("maximum version is lower than minimum version")
            if high == low and not (self.is_min_inclusive and self.is_max_inclusive):
                raise ValueError("range contains no versions")

    @classmethod
    def parse(cls, text: str) -> "VersionRange":
        """Parse a version range; raises VersionFormatError on malformed input."""
        if text is None:
            raise VersionFormatError(text, "version range is required")
        try:
            return cls._parse(text.strip())
        except VersionFormatError as exc:
            if exc.text == text:
                raise
            raise VersionFormatError(text, exc.reason or str(exc)) from exc
        except ValueError as exc:
            raise VersionFormatError(text, str(exc)) from exc

    @classmethod
    def _parse(cls, value: str) -> "VersionRange":
        if not value:
            raise ValueError("version range is empty")

        starts, ends = value[0] in _OPEN, value[-1] in _CLOSE
        if not starts and not ends:
            if "*" in value:
                return cls(float_range=FloatRange.parse(value))
            return cls(min_version=NuGetVersion.parse(value), is_min_inclusive=True)
        if not (starts and ends):
            raise ValueError("mismatched brackets")

        inner = value[1:-1]
        if any(ch in inner for ch in _OPEN + _CLOSE):
            raise ValueError("unexpected bracket inside interval")
        min_inclusive = value[0] == "["
        max_inclusive = value[-1] == "]"
        parts = inner.split(",")
        if len(parts) > 2:
            raise ValueError("interval has more than two bounds")

        if len(parts) == 1:
            exact = parts[0].strip()
            if not exact:
                raise ValueError("interval is empty")
            if not (min_inclusive and max_inclusive):
                raise ValueError("a single version must be enclosed in square brackets")
            if "*" in exact:
                raise ValueError("an exact version cannot float")
            version = NuGetVersion.parse(exact)
            return cls(version, version, True, True)

        low_text, high_text = parts[0].strip(), parts[1].strip()
        float_range = None
        low = high = None
        if low_text:
            if "*" in low_text:
                float_range = FloatRange.parse(low_text)
            else:
                low = NuGetVersion.parse(low_text)
        if high_text:
            if "*" in high_text:
                raise ValueError("the upper bound cannot float")
            high = NuGetVersion.parse(high_text)
        return cls(low, high, min_inclusive, max_inclusive, float_range)

    @property
    def is_floating(self) -> bool:
        return self.float_range is not None

    @property
    def float_behavior(self) -> FloatBehavior:
        return self.float_range.float_behavior if self.float_range else FloatBehavior.NONE

    @property
    def has_lower_bound(self) -> bool:
        return self.min_version is not None

    @property
    def has_upper_bound(self) -> bool:
        return self.max_version is not None

    def _min_text(self) -> str:
        if self.float_range is not None:
            return str(self.float_range)
        return str(self.min_version)

    def to_library_string(self, name: str) -> str:
        """Render ``"<name> >= <min>[<= |< ><max>]"`` as stored in lock files.

        Floating ranges emit their pattern as the minimum; the maximum drops any
        release label. Ranges without a minimum render as ``"<name> "``.
        """
        text = f"{name} "
        if self.min_version is None:
            return text
        text += ">= " + self._min_text()
        if self.max_version is not None:
            text += "<= " if self.is_max_inclusive else "< "
            text += self.max_version.version_text
        return text

    def satisfies(self, version: NuGetVersion) -> bool:
        """Return True when version lies within the bounds."""
        low, high = self.min_version, self.max_version
        if low is not None:
            if version < low or (version == low and not self.is_min_inclusive):
                return False
        if high is not None:
            if version > high or (version == high and not self.is_max_inclusive):
                return False
        return True

    def find_best_match(
        self, versions: Iterable[Union[NuGetVersion, str]]
    ) -> Optional[NuGetVersion]:
        """Pick the preferred version among candidates.

        Floating ranges prefer the highest version matching the pattern;
        other ranges take the lowest satisfying version. Unparseable candidate
        strings are skipped.
        """
        candidates = []
        for candidate in versions:
            if isinstance(candidate, str):
                try:
                    candidate = NuGetVersion.parse(candidate)
                except VersionFormatError:
                    logger.debug("Skipping invalid candidate version %r", candidate)
                    continue
            if candidate is not None and self.satisfies(candidate):
                candidates.append(candidate)
        if not candidates:
            return None
        if self.float_range is not None:
            floating = [v for v in candidates if self.float_range.satisfies(v)]
            if floating:
                return max(floating)
        return min(candidates)

    def __str__(self) -> str:
        low, high = self.min_version, self.max_version
        if self.float_range is not None and high is None:
            return str(self.float_range)
        if self.float_range is None and low is not None and high is not None and low == high:
            return f"[{low}]"
        left = "[" if self.is_min_inclusive else "("
        right = "]" if self.is_max_inclusive else ")"
        low_text = self._min_text() if low is not None else ""
        high_text = str(high) if high is not None else ""
        return f"{left}{low_text}, {high_text}{right}"


VersionRange.ALL = VersionRange()  # type: ignore[attr-defined]
