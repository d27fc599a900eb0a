"""Entry point source file resolution and Scala 3 modernization."""

from pathlib import Path

# Lines kept from the top of App.scala (package clause and header comments).
DEFAULT_HEADER_LINES = 5

SCALA3_MAIN_STUB = '@main def main() =\n\tprintln("Hello World!")\n'


def main_file_path(build_file_path: Path, package_path: list[str]) -> Path:
    """Build the expected location of the application's ``App.scala``.

    The file is not checked for existence.

    Args:
        build_file_path: Path to the module's build file.
        package_path: Package segments from ``extract_package_path``.

    Returns:
        ``<build-file-dir>/src/main/scala/<package...>/App.scala``.
    """
    return build_file_path.parent.joinpath("src", "main", "scala", *package_path, "App.scala")


def modernize_main_file(source: str, header_lines: int = DEFAULT_HEADER_LINES) -> str:
    """Replace the body of ``App.scala`` with a Scala 3 ``@main`` function.

    Carriage returns are dropped, the first ``header_lines`` lines are kept,
    and the fixed stub is appended. Anything past those lines is discarded,
    real code included.

    Args:
        source: Current contents of the main file.
        header_lines: Number of leading lines to keep.

    Returns:
        The new file contents, ending with a newline.
    """
    header = "\n".join(source.replace("\r", "").split("\n")[:header_lines])
    return f"{header}\n{SCALA3_MAIN_STUB}"
