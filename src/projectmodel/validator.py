"""Lock file consistency validation.

A lock file is current for a project only when every recorded dependency group
matches what the project declares today. Staleness is an expected state, so
mismatches produce ``False`` (logged at DEBUG with the reason) and never raise.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from versioning import LibraryDependency

from .lockfile import LockFile, library_range_to_string
from .package_spec import PackageSpec, TargetFrameworkInformation

logger = logging.getLogger(__name__)


def _canonical(dependencies: Iterable[LibraryDependency]) -> List[str]:
    return sorted(
        library_range_to_string(d.library_range.name, d.library_range.version_range) for d in dependencies
    )


def _find_framework(spec: PackageSpec, framework_name: str) -> Optional[TargetFrameworkInformation]:
    wanted = framework_name.lower()
    for info in spec.target_frameworks:
        if str(info.framework_name).lower() == wanted:
            return info
    return None


def _reject(reason: str, **fields) -> bool:
    if is_debug_enabled(logger):
        logger.debug("Lock file is not valid for project: %s", reason, extra=extra_context(
            event="decision", component="lockfile_validator", action="validate",
            outcome="invalid", reason=reason, **fields
        ))
    return False


def is_lock_file_valid(lock_file: LockFile, spec: PackageSpec) -> bool:
    """Return True when lock_file was produced from spec's current declarations.

    Checks, in order: the format version, the group count (one shared group plus
    one per declared framework) and, for each group, the sorted canonical
    dependency strings against the spec.

    Raises:
        TypeError: lock_file or spec is None.
    """
    if lock_file is None or spec is None:
        raise TypeError("lock_file and spec are required")

    if lock_file.version != Constants.LOCK_FILE_FORMAT_VERSION:
        return _reject("format version mismatch", found=lock_file.version,
                       expected=Constants.LOCK_FILE_FORMAT_VERSION)

    groups = lock_file.project_file_dependency_groups
    expected_groups = len(spec.target_frameworks) + 1
    if len(groups) != expected_groups:
        return _reject("dependency group count mismatch", found=len(groups), expected=expected_groups)

    for group in groups:
        if not group.framework_name:
            declared = _canonical(spec.dependencies)
        else:
            info = _find_framework(spec, group.framework_name)
            if info is None:
                return _reject("framework not declared by project", framework=group.framework_name)
            declared = _canonical(info.dependencies)

        if declared != sorted(group.dependencies):
            return _reject("dependencies differ", framework=group.framework_name or "<shared>")

    return True
