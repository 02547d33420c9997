"""Project specification: declared frameworks and direct dependencies.

``read_package_spec`` understands the project.json shape::

    {
      "dependencies": {"Newtonsoft.Json": "6.0.4", "Build.Tool": {"version": "1.0.*", "type": "build"}},
      "frameworks": {"net45": {"dependencies": {"Microsoft.Bcl": "[1.1.0, 2.0.0)"}}, "dnxcore50": {}}
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from frameworks import FrameworkIdentity
from versioning import LibraryDependency, LibraryRange, VersionFormatError, VersionRange

logger = logging.getLogger(__name__)


class ProjectSpecFormatError(ValueError):
    """Raised when a project specification document is malformed."""


@dataclass(frozen=True)
class TargetFrameworkInformation:
    """A declared target framework and the dependencies specific to it."""
    framework_name: FrameworkIdentity
    dependencies: Tuple[LibraryDependency, ...] = ()


@dataclass
class PackageSpec:
    """Declared (unresolved) dependencies of a project, shared and per framework."""
    name: str = ""
    dependencies: List[LibraryDependency] = field(default_factory=list)
    target_frameworks: List[TargetFrameworkInformation] = field(default_factory=list)

    def __post_init__(self):
        seen = set()
        for info in self.target_frameworks:
            if info.framework_name in seen:
                raise ValueError(f"duplicate target framework {info.framework_name}")
            seen.add(info.framework_name)

    def get_target_framework(self, framework: FrameworkIdentity) -> Optional[TargetFrameworkInformation]:
        for info in self.target_frameworks:
            if info.framework_name == framework:
                return info
        return None


def _read_dependencies(section: Any, where: str) -> Tuple[LibraryDependency, ...]:
    if section is None:
        return ()
    if not isinstance(section, dict):
        raise ProjectSpecFormatError(f"'{where}' must be an object")

    dependencies: List[LibraryDependency] = []
    for name, value in section.items():
        dependency_type = "default"
        if isinstance(value, dict):
            range_text = value.get("version")
            dependency_type = value.get("type", dependency_type)
            if not isinstance(dependency_type, str):
                raise ProjectSpecFormatError(f"dependency '{name}' in '{where}' has an invalid type")
        elif value is None or isinstance(value, str):
            range_text = value
        else:
            raise ProjectSpecFormatError(f"dependency '{name}' in '{where}' must be a string or object")
        if range_text is not None and not isinstance(range_text, str):
            raise ProjectSpecFormatError(f"dependency '{name}' in '{where}' has a non-string version")

        version_range = None
        if range_text and range_text.strip():
            try:
                version_range = VersionRange.parse(range_text)
            except VersionFormatError as exc:
                raise VersionFormatError(range_text, exc.reason, item_name=name) from exc
        try:
            library_range = LibraryRange(name, version_range)
        except ValueError as exc:
            raise ProjectSpecFormatError(f"'{where}' contains a dependency without a name") from exc
        dependencies.append(LibraryDependency(library_range, dependency_type))
    return tuple(dependencies)


def read_package_spec(content: Union[str, bytes, Mapping[str, Any]], name: str = "") -> PackageSpec:
    """Build a PackageSpec from project.json content.

    Args:
        content: JSON text or an already-decoded mapping.
        name: Project name.

    Returns:
        The parsed PackageSpec.

    Raises:
        ProjectSpecFormatError: Invalid JSON, wrong shapes or duplicate frameworks.
        VersionFormatError: A dependency version is malformed.
    """
    if isinstance(content, (str, bytes)):
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ProjectSpecFormatError(f"Invalid project.json: {exc}") from exc
    else:
        data = content
    if not isinstance(data, dict):
        raise ProjectSpecFormatError("project.json must contain an object")

    dependencies = list(_read_dependencies(data.get("dependencies"), "dependencies"))

    frameworks_section: Dict[str, Any] = data.get("frameworks", {})
    if frameworks_section is None:
        frameworks_section = {}
    if not isinstance(frameworks_section, dict):
        raise ProjectSpecFormatError("'frameworks' must be an object")

    target_frameworks: List[TargetFrameworkInformation] = []
    for moniker, body in frameworks_section.items():
        if body is not None and not isinstance(body, dict):
            raise ProjectSpecFormatError(f"framework '{moniker}' must be an object")
        framework = FrameworkIdentity.parse(moniker)
        if framework.is_unsupported:
            logger.warning("Unsupported target framework %r in project %s", moniker, name or "<unnamed>")
        section = body.get("dependencies") if body else None
        target_frameworks.append(
            TargetFrameworkInformation(framework, _read_dependencies(section, f"frameworks/{moniker}/dependencies"))
        )

    try:
        return PackageSpec(name=name, dependencies=dependencies, target_frameworks=target_frameworks)
    except ValueError as exc:
        raise ProjectSpecFormatError(str(exc)) from exc
