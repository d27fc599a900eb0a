"""Gradle Scala 2 to Scala 3 migration package."""

from .cli import migrate, main
from .errors import MigrationError
from .models import BuildFile, MigrationResult

__all__ = ["migrate", "main", "MigrationError", "BuildFile", "MigrationResult"]
