"""CLI entry point, pipeline orchestration, and file I/O.

Wires together build file location, text rewriting, and main file
modernization to execute the Scala 2 -> Scala 3 migration.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .errors import MigrationError
from .gradle_rewriter import extract_package_path, leftover_legacy_references, rewrite_build_file
from .locator import locate_build_file
from .main_file import DEFAULT_HEADER_LINES, main_file_path, modernize_main_file
from .models import MigrationResult
from .version import validated_version


def migrate(
    project_path: Path,
    version: str,
    dry_run: bool = False,
    header_lines: int = DEFAULT_HEADER_LINES,
) -> MigrationResult:
    """Run the full Scala 3 migration.

    Locates the build file, rewrites its dependency coordinate, version banner
    and (for applications) its ``.App`` entry point, then replaces the body of
    the application's ``App.scala`` with a ``@main`` function.

    The build file is written before the main file is read. If the main file
    step fails, the build file stays modified.

    Args:
        project_path: Project root (containing ``app/`` or ``lib/``) or a build file path.
        version: Target Scala version, ``N.N.N``.
        dry_run: If ``True``, prints the new contents to stdout instead of writing files.
        header_lines: Number of leading lines of ``App.scala`` to keep.

    Returns:
        A ``MigrationResult`` describing what was (or would be) changed.

    Raises:
        MigrationError: For an invalid version, missing build file, unexpected
            ``mainClass``, or negative ``header_lines``.
    """
    version = validated_version(version)
    if header_lines < 0:
        raise MigrationError(f"Header line count must not be negative, got {header_lines}")

    build_file = locate_build_file(project_path)
    result = MigrationResult(build_file=build_file, version=version)

    build_text = _read(build_file.path)
    if not build_file.is_library:
        result.package_path = extract_package_path(build_text)
    new_build_text = rewrite_build_file(build_text, version, build_file.is_library)
    result.warnings = leftover_legacy_references(new_build_text, build_file.is_library)

    if dry_run:
        _show(str(build_file.path), new_build_text)
    else:
        _write(build_file.path, new_build_text)

    for warning in result.warnings:
        print(f"WARNING: {build_file.path}: {warning}", file=sys.stderr)

    if build_file.is_library:
        print(f"\nLibrary module detected ({build_file.path}), skipping main file")
    else:
        result.main_file = main_file_path(build_file.path, result.package_path)
        new_main_text = modernize_main_file(_read(result.main_file), header_lines)
        if dry_run:
            _show(str(result.main_file), new_main_text)
        else:
            _write(result.main_file, new_main_text)

    if not dry_run:
        print(f"\n✅ Migration to Scala {version} complete!")
        print("\n⚠️  Next steps:")
        print("  1. Review the rewritten files and adjust as needed")
        print("  2. Run: ./gradlew build")
        print("  3. Fix any compilation or test issues")
    return result


def _read(path: Path) -> str:
    """Read a file as UTF-8 without newline translation.

    Args:
        path: Filesystem path to read.

    Returns:
        The file content, with its original line endings.
    """
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write(path: Path, content: str):
    """Overwrite a file in place, keeping line endings exactly as given.

    Args:
        path: Filesystem path to write to.
        content: File content string (UTF-8 encoded).
    """
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    print(f"  ✓ {path}")


def _show(title: str, content: str):
    """Print a file's would-be content under a ``====`` banner."""
    print("=" * 60)
    print(title)
    print("=" * 60)
    print(content)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``.

    Returns:
        Namespace with ``project``, ``version``, ``dry_run`` and ``header_lines``.
    """
    parser = argparse.ArgumentParser(
        prog="scala3-migrate",
        description="Migrate a Gradle Scala 2 project (from `gradle init`) to Scala 3",
    )
    parser.add_argument("project", type=Path, help="Path to the project root or its build.gradle[.kts]")
    parser.add_argument("version", help="Target Scala version (ie 3.1.0)")
    parser.add_argument("--dry-run", "-n", action="store_true", help="Print output without writing files")
    parser.add_argument(
        "--header-lines", type=int, default=DEFAULT_HEADER_LINES,
        help=f"Leading lines of App.scala to keep (default: {DEFAULT_HEADER_LINES})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None):
    """CLI entry point. Parses arguments and delegates to ``migrate()``.

    Expected failures are reported as a single ``ERROR:`` line on stderr with
    exit status 1. Anything else propagates.
    """
    args = parse_args(argv)
    try:
        migrate(args.project, args.version, args.dry_run, args.header_lines)
    except MigrationError as err:
        print(f"ERROR: {err}", file=sys.stderr)
        sys.exit(1)
