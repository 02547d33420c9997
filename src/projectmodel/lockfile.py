"""Lock file model.

The lock file records, per target framework and runtime identifier, the
libraries restore resolved, together with the dependency declarations it was
produced from (``project_file_dependency_groups``). Those rows hold canonical
library-range strings so a later restore can tell whether the lock is stale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from constants import Constants
from frameworks import FrameworkIdentity
from versioning import LibraryDependency, NuGetVersion, VersionRange

from .package_spec import PackageSpec


def library_range_to_string(name: str, version_range: Optional[VersionRange]) -> str:
    """Runtime-style ``"Name >= min< max"`` string stored in dependency groups."""
    if version_range is None:
        return f"{name} "
    return version_range.to_library_string(name)


@dataclass
class ProjectFileDependencyGroup:
    """Dependency strings for one framework; an empty name is the shared group."""
    framework_name: str = ""
    dependencies: List[str] = field(default_factory=list)


@dataclass
class LockFileLibrary:
    """A resolved package recorded in the lock file."""
    name: str
    version: NuGetVersion
    type: str = "package"
    sha512: Optional[str] = None
    files: List[str] = field(default_factory=list)


@dataclass
class LockFileTargetLibrary:
    """A library as resolved for one target, with its own dependencies and assets."""
    name: str
    version: Optional[NuGetVersion] = None
    type: str = "package"
    dependencies: Dict[str, str] = field(default_factory=dict)
    compile: List[str] = field(default_factory=list)
    runtime: List[str] = field(default_factory=list)


@dataclass
class LockFileTarget:
    """Resolution result for a (framework, runtime identifier) pair."""
    target_framework: FrameworkIdentity
    runtime_identifier: Optional[str] = None
    libraries: List[LockFileTargetLibrary] = field(default_factory=list)

    @property
    def name(self) -> str:
        if self.runtime_identifier:
            return f"{self.target_framework}/{self.runtime_identifier}"
        return str(self.target_framework)


def _same_runtime(left: Optional[str], right: Optional[str]) -> bool:
    if not left and not right:
        return True
    return left is not None and right is not None and left.lower() == right.lower()


@dataclass
class LockFile:
    """The lock document; owns its groups, libraries and targets."""
    is_locked: bool = False
    version: int = field(default_factory=lambda: Constants.LOCK_FILE_FORMAT_VERSION)
    project_file_dependency_groups: List[ProjectFileDependencyGroup] = field(default_factory=list)
    libraries: List[LockFileLibrary] = field(default_factory=list)
    targets: List[LockFileTarget] = field(default_factory=list)

    def get_target(
        self, framework: FrameworkIdentity, runtime_identifier: Optional[str] = None
    ) -> Optional[LockFileTarget]:
        """First target for framework whose RID matches (case-insensitive, None == "")."""
        for target in self.targets:
            if target.target_framework == framework and _same_runtime(runtime_identifier, target.runtime_identifier):
                return target
        return None

    def get_library(self, name: str, version: Union[NuGetVersion, str]) -> Optional[LockFileLibrary]:
        """First library with exactly this name and an equal version."""
        if isinstance(version, str):
            version = NuGetVersion.parse(version)
        for library in self.libraries:
            if library.name == name and library.version == version:
                return library
        return None

    def is_valid_for_package_spec(self, spec: PackageSpec) -> bool:
        from .validator import is_lock_file_valid

        return is_lock_file_valid(self, spec)


def _render(dependencies: List[LibraryDependency]) -> List[str]:
    return [library_range_to_string(d.library_range.name, d.library_range.version_range) for d in dependencies]


def build_project_file_dependency_groups(spec: PackageSpec) -> List[ProjectFileDependencyGroup]:
    """Dependency group rows restore writes for a spec: shared first, then one per framework."""
    groups = [ProjectFileDependencyGroup("", _render(spec.dependencies))]
    for info in spec.target_frameworks:
        groups.append(ProjectFileDependencyGroup(str(info.framework_name), _render(list(info.dependencies))))
    return groups
