"""Exceptions raised while generating a project.

Each error carries the operation that failed, the path it was working on,
and the underlying cause. ``str()`` gives the one-line diagnostic shown to
the user by the CLI.
"""


def _one_line(cause):
    # GitPython errors span several lines
    return " ".join(line.strip() for line in str(cause).splitlines() if line.strip())


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""

    operation = "scaffold project"

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(self._message())

    @property
    def reason(self):
        return _one_line(self.cause)

    def _message(self):
        return f"Failed to {self.operation} {self.path}: {self.reason}"


class DirectoryCreationError(ScaffoldError):
    operation = "create directory"


class ProjectExistsError(DirectoryCreationError):
    """The project root already exists."""

    operation = "create project directory"

    def _message(self):
        return f"Failed to {self.operation}: {self.reason}"


class FileCreationError(ScaffoldError):
    """A manifest file could not be opened for writing."""

    operation = "create file"


class FileWriteError(ScaffoldError):
    """A manifest file was opened but its content could not be written."""

    operation = "write to file"


class RepositoryInitError(ScaffoldError):
    operation = "initialize Git"

    def _message(self):
        return f"Failed to {self.operation}: {self.reason}"
