"""Fixed directory and file manifests for a generated project."""

import os
from dataclasses import dataclass

_FIXED_DIRECTORIES = [
    "internal/handlers",
    "internal/services",
    "internal/repository",
    "internal/models/api",
    "internal/models/db",
    "internal/middlewares",
    "internal/utils",
    "pkg/logger",
    "pkg/config",
    "tests/unit",
    "tests/integration",
    "migrations",
    "docs",
]


@dataclass(frozen=True)
class ManifestFile:
    """A generated file: its path relative to the project root and its template."""

    path: str
    template: str


def directory_manifest(project_name):
    """Return the relative directories to create, in creation order.

    The first entry is the command directory named after the project.
    """
    return [os.path.join("cmd", project_name)] + _FIXED_DIRECTORIES


def file_manifest(project_name):
    """Return the files to generate, in write order."""
    return [
        ManifestFile(os.path.join("cmd", project_name, "main.go"), "main.go.j2"),
        ManifestFile(".env", "env.j2"),
        ManifestFile(".gitignore", "gitignore.j2"),
        ManifestFile("Makefile", "Makefile.j2"),
        ManifestFile(os.path.join("pkg", "logger", "logger.go"), "logger.go.j2"),
        ManifestFile(os.path.join("pkg", "config", "config.go"), "config.go.j2"),
    ]
