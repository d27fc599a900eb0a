"""Build file text transformations.

Pure string logic with no file I/O: package path extraction from the
``mainClass`` declaration and the Scala 2 -> Scala 3 substitutions applied to
``build.gradle`` / ``build.gradle.kts``.

Every substitution replaces the first match only. Later occurrences are left
as they are and can be listed with ``leftover_legacy_references``.
"""

import re

from .errors import MigrationError

# A quoted dotted name ending in .App or .main, e.g. "com.example.App".
# Group 2 holds the unquoted value.
MAIN_CLASS_PATTERN = re.compile(r"""(["'])([^"'\s]+\.(?:App|main))\1""")

# The `// Use Scala 2.13 in our library project` comment from `gradle init`.
BANNER_PATTERN = re.compile(r"Use Scala \S+ ")

# Quoted Scala 2 standard library coordinate, either quote style.
SCALA2_LIBRARY_PATTERN = re.compile(r"""(["'])org\.scala-lang:scala-library:[^"'\n]*\1""")

LEGACY_ENTRY_POINT = ".App"
# A whole .App reference, not .Apple or .AppConfig.
LEGACY_ENTRY_POINT_PATTERN = re.compile(r"\.App\b")
SCALA3_ENTRY_POINT = ".main"

SCALA3_LIBRARY = "org.scala-lang:scala3-library_3"


def extract_package_path(build_file_text: str) -> list[str]:
    """Extract the package segments of the application's ``mainClass``.

    Finds the first quoted value ending in ``.App`` or ``.main`` and returns
    its dot-separated segments without the trailing ``App`` / ``main``:

        mainClass = "com.example.App"  →  ["com", "example"]

    Args:
        build_file_text: Full text of the build file.

    Returns:
        Ordered package segments.

    Raises:
        MigrationError: If no such quoted value exists.
    """
    match = MAIN_CLASS_PATTERN.search(build_file_text)
    if match is None:
        raise MigrationError(
            "In gradle build file's 'application' section, 'mainClass' is an unexpected value. "
            "Expected something like: mainClass = \"<package>.App\""
        )
    pieces = match.group(2).split(".")
    # drop App / main, it is the object name rather than a package
    pieces.pop()
    return pieces


def replace_banner(build_file_text: str, version: str) -> str:
    """Point the ``Use Scala <version>`` comment at the target version."""
    return BANNER_PATTERN.sub(f"Use Scala {version} ", build_file_text, count=1)


def replace_library_coordinate(build_file_text: str, version: str) -> str:
    """Swap the Scala 2 standard library dependency for ``scala3-library_3``.

    Args:
        build_file_text: Full text of the build file.
        version: Target Scala 3 version.

    Returns:
        Text with the first quoted ``org.scala-lang:scala-library:*`` replaced
        by ``"org.scala-lang:scala3-library_3:<version>"``.
    """
    return SCALA2_LIBRARY_PATTERN.sub(f'"{SCALA3_LIBRARY}:{version}"', build_file_text, count=1)


def replace_entry_point(build_file_text: str) -> str:
    """Rename the first ``.App`` reference to ``.main``."""
    return build_file_text.replace(LEGACY_ENTRY_POINT, SCALA3_ENTRY_POINT, 1)


def rewrite_build_file(build_file_text: str, version: str, is_library: bool = False) -> str:
    """Apply all Scala 3 substitutions to a build file's text.

    Order: version banner, library coordinate, then (applications only) the
    ``.App`` -> ``.main`` rename.

    Args:
        build_file_text: Original build file text.
        version: Validated target Scala version.
        is_library: Library modules keep their text free of entry point edits.

    Returns:
        The rewritten text.
    """
    text = replace_banner(build_file_text, version)
    text = replace_library_coordinate(text, version)
    if not is_library:
        text = replace_entry_point(text)
    return text


def leftover_legacy_references(build_file_text: str, is_library: bool = False) -> list[str]:
    """Describe Scala 2 references still present in a rewritten build file.

    Args:
        build_file_text: Build file text after ``rewrite_build_file``.
        is_library: Libraries are not checked for ``.App``.

    Returns:
        One message per leftover kind, empty when nothing remains.
    """
    messages = []
    libraries = SCALA2_LIBRARY_PATTERN.findall(build_file_text)
    if libraries:
        messages.append(
            f"{len(libraries)} more org.scala-lang:scala-library dependency(ies) left unchanged"
        )
    if not is_library:
        entry_points = len(LEGACY_ENTRY_POINT_PATTERN.findall(build_file_text))
        if entry_points:
            messages.append(f"{entry_points} more '{LEGACY_ENTRY_POINT}' reference(s) left unchanged")
    return messages
