"""ProjectScaffolder: builds the directory tree and files of a new project."""

import logging
import os

from goscaffold.errors import (
    DirectoryCreationError,
    FileCreationError,
    FileWriteError,
    ProjectExistsError,
)
from goscaffold.manifest import directory_manifest, file_manifest
from goscaffold.templates.template_renderer import render_template

logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o755


class ProjectScaffolder:
    """Creates a project tree, then hands it to the repository initializer.

    Args:
        repository_initializer: Object with ``init_repository(project_dir)``.
        template_renderer: Callable(template_name, *, package, **kwargs) -> str.
    """

    def __init__(self, repository_initializer, template_renderer=render_template):
        self._repository_initializer = repository_initializer
        self._template_renderer = template_renderer

    def create(self, opts):
        """Generate the project described by ``opts`` and return its root path.

        The first failure raises and leaves whatever was already written on disk.
        """
        project_dir = opts.project_dir
        self.create_root(project_dir)
        self.create_directories(project_dir, opts.project_name)
        self.write_files(project_dir, opts.project_name)
        self._repository_initializer.init_repository(project_dir)
        return project_dir

    def create_root(self, project_dir):
        """Create the project root. It must not already exist."""
        try:
            os.mkdir(project_dir, DIRECTORY_MODE)
        except FileExistsError as e:
            raise ProjectExistsError(project_dir, e) from e
        except OSError as e:
            raise DirectoryCreationError(project_dir, e) from e
        logger.info("Created project directory %s", project_dir)

    def create_directories(self, project_dir, project_name):
        for relative in directory_manifest(project_name):
            dir_path = os.path.join(project_dir, relative)
            try:
                os.makedirs(dir_path, DIRECTORY_MODE, exist_ok=True)
            except OSError as e:
                raise DirectoryCreationError(dir_path, e) from e
            logger.debug("Created directory %s", dir_path)

    def write_files(self, project_dir, project_name):
        """Render every manifest file and write it, overwriting existing files."""
        for entry in file_manifest(project_name):
            file_path = os.path.join(project_dir, entry.path)
            content = self.render(entry.template, project_name)
            try:
                f = open(file_path, "w", encoding="utf-8")
            except OSError as e:
                raise FileCreationError(file_path, e) from e
            try:
                with f:
                    f.write(content)
            except OSError as e:
                raise FileWriteError(file_path, e) from e
            logger.debug("Wrote %s", file_path)

    def render(self, template_name, project_name):
        return self._template_renderer(
            template_name, package=__package__, project_name=project_name,
        )
