"""Target framework identity.

A framework is either *known* (identifier, version, profile) or *unsupported*,
in which case only the raw string it was parsed from is kept. Unsupported
frameworks compare by raw string, so distinct unparseable monikers stay
distinguishable instead of collapsing into one bucket.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from . import mappings

_SHORT_FORM_RE = re.compile(
    r"^(?P<identifier>[A-Za-z\.]+?)(?P<version>\d+(?:\.\d+)*)?(?:-(?P<profile>.+))?$"
)
_PROFILE_RE = re.compile(r"^[A-Za-z0-9\.\+]+$")
_DOTTED_RE = re.compile(r"^\d+(?:\.\d+){0,3}$")

FrameworkVersion = Tuple[int, int, int, int]
_ZERO: FrameworkVersion = (0, 0, 0, 0)


def _pad(parts) -> FrameworkVersion:
    values = [int(p) for p in parts]
    values.extend([0] * (4 - len(values)))
    return tuple(values)  # type: ignore[return-value]


def _parse_short_version(text: str) -> Optional[FrameworkVersion]:
    """``45`` -> 4.5, ``403`` -> 4.0.3, ``10.0`` -> 10.0; None when invalid."""
    if "." in text:
        if not _DOTTED_RE.match(text):
            return None
        return _pad(text.split("."))
    if len(text) > 4:
        return None
    return _pad(list(text))


def _trimmed(version: FrameworkVersion) -> Tuple[int, ...]:
    parts = list(version)
    while len(parts) > 2 and parts[-1] == 0:
        parts.pop()
    return tuple(parts)


@dataclass(frozen=True, eq=False)
class FrameworkIdentity:
    """Resolved target framework, or the Unsupported marker for raw text."""

    identifier: Optional[str]
    version: FrameworkVersion = _ZERO
    profile: str = ""
    raw: str = ""

    @property
    def is_unsupported(self) -> bool:
        return self.identifier is None

    @property
    def is_any(self) -> bool:
        return self.identifier == mappings.ANY

    @classmethod
    def unsupported(cls, raw: str) -> "FrameworkIdentity":
        return cls(None, _ZERO, "", raw)

    @classmethod
    def parse(cls, raw: Optional[str]) -> "FrameworkIdentity":
        """Parse a full (``.NETFramework,Version=v4.5``) or short (``net45``) name.

        Empty input yields ANY; anything unrecognized yields an unsupported
        identity carrying the raw string.
        """
        if raw is None or not raw.strip():
            return ANY
        text = raw.strip()
        if "," in text:
            parsed = cls._parse_full_name(text)
        else:
            parsed = cls._parse_short_name(text)
        if parsed is None:
            return cls.unsupported(raw)
        return cls(parsed.identifier, parsed.version, parsed.profile, raw)

    @classmethod
    def _parse_full_name(cls, text: str) -> Optional["FrameworkIdentity"]:
        parts = [part.strip() for part in text.split(",")]
        identifier = mappings.IDENTIFIERS.get(parts[0].lower())
        if identifier is None:
            return None
        version, profile = _ZERO, ""
        for part in parts[1:]:
            key, sep, value = part.partition("=")
            key, value = key.strip().lower(), value.strip()
            if not sep:
                return None
            if key == "version":
                value = value[1:] if value[:1] in ("v", "V") else value
                if not _DOTTED_RE.match(value):
                    return None
                version = _pad(value.split("."))
            elif key == "profile":
                if value and not _PROFILE_RE.match(value):
                    return None
                profile = value
            else:
                return None
        return cls(identifier, version, profile, text)

    @classmethod
    def _parse_short_name(cls, text: str) -> Optional["FrameworkIdentity"]:
        match = _SHORT_FORM_RE.match(text)
        if not match:
            return None
        identifier = mappings.IDENTIFIERS.get(match.group("identifier").lower())
        if identifier is None:
            return None

        version = _ZERO
        if match.group("version"):
            version = _parse_short_version(match.group("version"))
            if version is None:
                return None

        profile = match.group("profile") or ""
        if profile and not _PROFILE_RE.match(profile):
            return None

        if identifier == mappings.NET_PORTABLE and "+" in profile:
            # Compact portable form lists member frameworks and carries no version.
            if match.group("version"):
                return None
            profile = cls._normalize_portable_profile(profile)
            if profile is None:
                return None
        elif profile:
            profile = mappings.PROFILES.get(profile.lower(), profile)

        return cls(identifier, version, profile, text)

    @classmethod
    def _normalize_portable_profile(cls, profile: str) -> Optional[str]:
        members = []
        for member_text in profile.split("+"):
            member = cls._parse_short_name(member_text) if member_text else None
            if member is None or member.identifier == mappings.NET_PORTABLE:
                return None
            members.append(member.short_folder_name)
        return "+".join(sorted(set(members), key=str.lower))

    @property
    def framework_name(self) -> str:
        """Full display name, e.g. ``.NETFramework,Version=v4.0,Profile=Client``."""
        if self.is_unsupported:
            return self.raw
        version = ".".join(str(p) for p in _trimmed(self.version))
        name = f"{self.identifier},Version=v{version}"
        if self.profile:
            name = f"{name},Profile={self.profile}"
        return name

    @property
    def short_folder_name(self) -> str:
        if self.is_unsupported:
            return "unsupported"
        short = mappings.SHORT_NAMES.get(self.identifier, self.identifier.lower())
        if self.identifier == mappings.NET_PORTABLE and "+" in self.profile:
            return f"{short}-{self.profile}"
        if self.version != _ZERO:
            parts = _trimmed(self.version)
            if all(p < 10 for p in parts):
                short += "".join(str(p) for p in parts)
            else:
                short += ".".join(str(p) for p in parts)
        if self.profile:
            short += "-" + mappings.PROFILE_SHORT_NAMES.get(self.profile.lower(), self.profile)
        return short

    def is_compatible_with(self, candidate: "FrameworkIdentity") -> bool:
        """Exact-match compatibility; fallback rules belong to the dependency resolver."""
        return self == candidate

    def _key(self):
        if self.is_unsupported:
            return (None, self.raw)
        return (self.identifier, self.version, self.profile.lower())

    def __eq__(self, other):
        if not isinstance(other, FrameworkIdentity):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self) -> str:
        return self.framework_name

    def __repr__(self) -> str:
        if self.is_unsupported:
            return f"FrameworkIdentity.unsupported({self.raw!r})"
        return f"FrameworkIdentity({self.framework_name!r})"


ANY = FrameworkIdentity(mappings.ANY, _ZERO, "", "")
FrameworkIdentity.ANY = ANY  # type: ignore[attr-defined]
