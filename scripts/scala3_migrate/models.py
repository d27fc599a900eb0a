"""Migration data model classes.

Pure data structures passed between the locator, rewriters, and orchestrator.
No behavior or imports from other scala3_migrate modules.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class BuildFile:
    """A located Gradle build file.

    Attributes:
        path: Filesystem path to ``build.gradle`` or ``build.gradle.kts``.
        is_library: ``True`` when the build file belongs to a library module,
            which has no entry point and skips main-class handling.
    """
    path: Path
    is_library: bool = False


@dataclass
class MigrationResult:
    """Outcome of a single migration run.

    Attributes:
        build_file: The build file that was rewritten.
        version: The validated target Scala version.
        package_path: Package segments inferred from ``mainClass`` (empty for libraries).
        main_file: Path of the modernized entry-point source, or ``None`` for libraries.
        warnings: Messages about legacy references left in the build file.
    """
    build_file: BuildFile
    version: str
    package_path: list = field(default_factory=list)
    main_file: Optional[Path] = None
    warnings: list = field(default_factory=list)
