"""Project model: package specs, lock files and lock file validation.

- package_spec.py: declared frameworks and dependencies, project.json reader
- lockfile.py: lock file model, lookups and canonical dependency group rows
- lockfile_format.py: project.lock.json reader/writer
- validator.py: is a lock file still current for a package spec
"""

from .package_spec import (  # noqa: F401
    PackageSpec,
    ProjectSpecFormatError,
    TargetFrameworkInformation,
    read_package_spec,
)
from .lockfile import (  # noqa: F401
    LockFile,
    LockFileLibrary,
    LockFileTarget,
    LockFileTargetLibrary,
    ProjectFileDependencyGroup,
    build_project_file_dependency_groups,
    library_range_to_string,
)
from .lockfile_format import (  # noqa: F401
    LockFileFormatError,
    lock_file_to_dict,
    read_lock_file,
    write_lock_file,
)
from .validator import is_lock_file_valid  # noqa: F401

__all__ = [
    "PackageSpec",
    "ProjectSpecFormatError",
    "TargetFrameworkInformation",
    "read_package_spec",
    "LockFile",
    "LockFileLibrary",
    "LockFileTarget",
    "LockFileTargetLibrary",
    "ProjectFileDependencyGroup",
    "build_project_file_dependency_groups",
    "library_range_to_string",
    "LockFileFormatError",
    "lock_file_to_dict",
    "read_lock_file",
    "write_lock_file",
    "is_lock_file_valid",
]
