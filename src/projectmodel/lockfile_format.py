"""project.lock.json reader and writer.

Document shape::

    {
      "locked": false,
      "version": 1,
      "targets": {
        ".NETFramework,Version=v4.5": {"Newtonsoft.Json/6.0.4": {"type": "package", ...}},
        ".NETFramework,Version=v4.5/win7-x86": {...}
      },
      "libraries": {"Newtonsoft.Json/6.0.4": {"type": "package", "sha512": "...", "files": [...]}},
      "projectFileDependencyGroups": {"": ["Newtonsoft.Json >= 6.0.4"], ".NETFramework,Version=v4.5": []}
    }
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Tuple, Union

from constants import Constants
from frameworks import FrameworkIdentity
from versioning import NuGetVersion, VersionFormatError

from .lockfile import (
    LockFile,
    LockFileLibrary,
    LockFileTarget,
    LockFileTargetLibrary,
    ProjectFileDependencyGroup,
)

logger = logging.getLogger(__name__)


class LockFileFormatError(ValueError):
    """Raised when a lock file document is malformed."""


def _expect(value: Any, kind, where: str):
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise LockFileFormatError(f"'{where}' has an unexpected type ({type(value).__name__})")
    return value


def _split_library_key(key: str) -> Tuple[str, NuGetVersion]:
    name, sep, version = key.partition("/")
    if not sep or not name or not version:
        raise LockFileFormatError(f"library key {key!r} must look like 'Name/Version'")
    return name, NuGetVersion.parse(version)


def _string_list(value: Any, where: str) -> List[str]:
    items = _expect(value, list, where)
    for item in items:
        _expect(item, str, where)
    return list(items)


def _read_target(key: str, body: Any) -> LockFileTarget:
    framework_text, _, runtime_identifier = key.partition("/")
    target = LockFileTarget(FrameworkIdentity.parse(framework_text), runtime_identifier or None)
    for library_key, library_body in _expect(body, dict, f"targets/{key}").items():
        name, version = _split_library_key(library_key)
        where = f"targets/{key}/{library_key}"
        library_body = _expect(library_body or {}, dict, where)
        dependencies = _expect(library_body.get("dependencies", {}), dict, f"{where}/dependencies")
        target.libraries.append(LockFileTargetLibrary(
            name=name,
            version=version,
            type=_expect(library_body.get("type", "package"), str, f"{where}/type"),
            dependencies={str(k): _expect(v, str, f"{where}/dependencies/{k}") for k, v in dependencies.items()},
            compile=list(_expect(library_body.get("compile", {}), dict, f"{where}/compile")),
            runtime=list(_expect(library_body.get("runtime", {}), dict, f"{where}/runtime")),
        ))
    return target


def read_lock_file(content: Union[str, bytes, Mapping[str, Any]]) -> LockFile:
    """Build a LockFile from project.lock.json content.

    Args:
        content: JSON text or an already-decoded mapping.

    Returns:
        The parsed LockFile. Its version is not checked here; validation does that.

    Raises:
        LockFileFormatError: Invalid JSON or unexpected document structure.
    """
    if isinstance(content, (str, bytes)):
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            logger.warning("Failed to parse lock file (invalid JSON): %s", exc)
            raise LockFileFormatError(f"Invalid lock file JSON: {exc}") from exc
    else:
        data = content

    try:
        data = _expect(data, dict, "<root>")
        if "version" not in data:
            raise LockFileFormatError("lock file has no 'version'")
        lock = LockFile(
            is_locked=_expect(data.get("locked", False), bool, "locked"),
            version=_expect(data["version"], int, "version"),
        )
        for key, body in _expect(data.get("targets", {}), dict, "targets").items():
            lock.targets.append(_read_target(key, body))
        for key, body in _expect(data.get("libraries", {}), dict, "libraries").items():
            name, version = _split_library_key(key)
            body = _expect(body or {}, dict, f"libraries/{key}")
            lock.libraries.append(LockFileLibrary(
                name=name,
                version=version,
                type=_expect(body.get("type", "package"), str, f"libraries/{key}/type"),
                sha512=body.get("sha512"),
                files=_string_list(body.get("files", []), f"libraries/{key}/files"),
            ))
        groups = _expect(data.get("projectFileDependencyGroups", {}), dict, "projectFileDependencyGroups")
        for framework_name, dependencies in groups.items():
            lock.project_file_dependency_groups.append(ProjectFileDependencyGroup(
                framework_name,
                _string_list(dependencies, f"projectFileDependencyGroups/{framework_name}"),
            ))
    except VersionFormatError as exc:
        raise LockFileFormatError(f"Invalid version in lock file: {exc}") from exc
    return lock


def _target_library_to_dict(library: LockFileTargetLibrary) -> Dict[str, Any]:
    body: Dict[str, Any] = {"type": library.type}
    if library.dependencies:
        body["dependencies"] = dict(library.dependencies)
    if library.compile:
        body["compile"] = {path: {} for path in library.compile}
    if library.runtime:
        body["runtime"] = {path: {} for path in library.runtime}
    return body


def lock_file_to_dict(lock: LockFile) -> Dict[str, Any]:
    """Plain mapping in project.lock.json shape."""
    targets: Dict[str, Any] = {}
    for target in lock.targets:
        targets[target.name] = {
            f"{library.name}/{library.version}": _target_library_to_dict(library)
            for library in target.libraries
        }
    libraries: Dict[str, Any] = {}
    for library in lock.libraries:
        body: Dict[str, Any] = {"type": library.type}
        if library.sha512:
            body["sha512"] = library.sha512
        body["files"] = list(library.files)
        libraries[f"{library.name}/{library.version}"] = body
    return {
        "locked": lock.is_locked,
        "version": lock.version,
        "targets": targets,
        "libraries": libraries,
        "projectFileDependencyGroups": {
            group.framework_name: list(group.dependencies) for group in lock.project_file_dependency_groups
        },
    }


def write_lock_file(lock: LockFile) -> str:
    """Serialize a LockFile as project.lock.json text."""
    return json.dumps(lock_file_to_dict(lock), indent=Constants.LOCK_FILE_INDENT)
