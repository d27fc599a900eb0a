"""Exception raised for expected migration failures.

Anything raised as ``MigrationError`` is reported by the CLI as a one-line
``ERROR:`` message. Every other exception is left to propagate.
"""


class MigrationError(ValueError):
    """An expected, user-facing migration failure.

    Raised for an invalid target version, a build file that cannot be found,
    or a build file whose ``mainClass`` does not follow the ``.App`` /
    ``.main`` convention.
    """
