"""Shared test fixtures for the Scala 3 migration test suite."""

import textwrap
from pathlib import Path

import pytest

# Build files and sources as generated by `gradle init` for a Scala 2 project.
APP_BUILD_GRADLE = """\
    plugins {
        // Apply the scala Plugin to add support for Scala.
        id 'scala'

        // Apply the application plugin to add support for building a CLI application in Java.
        id 'application'
    }

    repositories {
        // Use Maven Central for resolving dependencies.
        mavenCentral()
    }

    dependencies {
        // Use Scala 2.13 in our library project
        implementation 'org.scala-lang:scala-library:2.13.8'

        // This dependency is used by the application.
        implementation 'com.google.guava:guava:31.0.1-jre'

        // Use Scalatest for testing our library
        testImplementation 'junit:junit:4.13.2'
        testImplementation 'org.scalatest:scalatest_2.13:3.2.10'
        testImplementation 'org.scalatestplus:junit-4-13_2.13:3.2.2.0'

        // Need scala-xml at test runtime
        testRuntimeOnly 'org.scala-lang.modules:scala-xml_2.13:1.2.0'
    }

    application {
        // Define the main class for the application.
        mainClass = 'com.example.demo.App'
    }
"""

APP_BUILD_GRADLE_KTS = """\
    plugins {
        scala
        application
    }

    repositories {
        mavenCentral()
    }

    dependencies {
        // Use Scala 2.13 in our library project
        implementation("org.scala-lang:scala-library:2.13.8")
        testImplementation("org.scalatest:scalatest_2.13:3.2.10")
    }

    application {
        // Define the main class for the application.
        mainClass.set("com.example.demo.App")
    }
"""

LIB_BUILD_GRADLE = """\
    plugins {
        // Apply the scala Plugin to add support for Scala.
        id 'scala'

        // Apply the java-library plugin for API and implementation separation.
        id 'java-library'
    }

    repositories {
        mavenCentral()
    }

    dependencies {
        // Use Scala 2.13 in our library project
        implementation "org.scala-lang:scala-library:2.13.8"
        testImplementation 'org.scalatest:scalatest_2.13:3.2.10'
    }
"""

APP_SCALA = """\
    /*
     * This Scala source file was generated by the Gradle 'init' task.
     */
    package com.example.demo

    object App {
      def main(args: Array[String]): Unit = {
        println(greeting())
      }

      def greeting(): String = "Hello, world!"
    }
"""


@pytest.fixture
def gradle_project(tmp_path):
    """Factory fixture that lays out a `gradle init` style project under tmp_path.

    Writes ``<module>/<build_name>`` and, when ``main_source`` is given,
    ``<module>/src/main/scala/<package>/App.scala``. Returns the project root.
    """
    def _write(
        build_content: str = APP_BUILD_GRADLE,
        module: str = "app",
        build_name: str = "build.gradle",
        package: tuple = ("com", "example", "demo"),
        main_source: str = APP_SCALA,
    ) -> Path:
        module_dir = tmp_path / module
        module_dir.mkdir(parents=True, exist_ok=True)
        (module_dir / build_name).write_text(textwrap.dedent(build_content), encoding="utf-8")
        if main_source is not None:
            src_dir = module_dir.joinpath("src", "main", "scala", *package)
            src_dir.mkdir(parents=True, exist_ok=True)
            (src_dir / "App.scala").write_text(textwrap.dedent(main_source), encoding="utf-8")
        return tmp_path
    return _write


@pytest.fixture
def app_scala_path(tmp_path):
    """Location of App.scala for the default application project."""
    return tmp_path / "app" / "src" / "main" / "scala" / "com" / "example" / "demo" / "App.scala"
