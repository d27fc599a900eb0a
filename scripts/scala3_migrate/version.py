"""Target Scala version validation."""

import re

from .errors import MigrationError

# Three dot-separated groups of 1-3 ASCII digits, e.g. 3.3.1.
VERSION_PATTERN = re.compile(r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}")


def validated_version(version: str) -> str:
    """Check that ``version`` looks like ``N.N.N`` and return it unchanged.

    Args:
        version: Raw version string from the command line.

    Returns:
        The same string.

    Raises:
        MigrationError: If the string is not three groups of 1-3 digits.
    """
    if VERSION_PATTERN.fullmatch(version):
        return version
    raise MigrationError(f"Invalid scala version string given: {version!r} (expected e.g. 3.3.1)")
