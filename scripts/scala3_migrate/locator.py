"""Gradle build file discovery.

Resolves the command-line path to a single build file and decides whether it
belongs to an application or a library module, which drives whether the
entry point is migrated.
"""

from pathlib import Path

from .errors import MigrationError
from .models import BuildFile

# Probe order: application module first, Groovy DSL before Kotlin DSL.
# The boolean marks library modules.
MODULE_DIRS = [
    ("app", False),
    ("lib", True),
]
BUILD_FILE_NAMES = ["build.gradle", "build.gradle.kts"]


def candidate_build_files(project_root: Path) -> list[BuildFile]:
    """List every build file location probed under a project root, in order.

    Args:
        project_root: Directory produced by ``gradle init`` (containing ``app/`` or ``lib/``).

    Returns:
        One ``BuildFile`` per probed path, whether or not it exists.
    """
    return [
        BuildFile(path=project_root / module_dir / name, is_library=is_library)
        for module_dir, is_library in MODULE_DIRS
        for name in BUILD_FILE_NAMES
    ]


def locate_build_file(path: Path) -> BuildFile:
    """Find the Gradle build file to migrate.

    A path that names an existing file is taken as the build file itself and
    treated as an application. A directory is probed for
    ``app/build.gradle[.kts]`` and then ``lib/build.gradle[.kts]``; the first
    hit wins.

    Args:
        path: Project root directory or an explicit build file path.

    Returns:
        The located ``BuildFile``.

    Raises:
        MigrationError: If nothing was found.
    """
    if path.is_file():
        return BuildFile(path=path, is_library=False)

    candidates = candidate_build_files(path)
    for candidate in candidates:
        if candidate.path.is_file():
            return candidate

    probed = ", ".join(str(c.path) for c in candidates)
    raise MigrationError(f"No Gradle build file found under {path} (looked for {probed})")
