"""GitRepositoryInitializer: creates an empty git repository for a new project.

Provides an injectable interface for repository initialization, enabling
FakeRepositoryInitializer in tests without running git.

GitPython is imported on first use: it probes for the git executable at
import time, and a missing executable must fail the init step, not the CLI.
"""

import logging

from goscaffold.errors import RepositoryInitError

logger = logging.getLogger(__name__)


def _import_git():
    import git

    return git


class GitRepositoryInitializer:
    """Runs ``git init`` inside a project directory via GitPython.

    Only the repository is created: nothing is staged or committed.
    """

    def init_repository(self, project_dir):
        """Initialize an empty repository with ``project_dir`` as working tree.

        Returns:
            The GitPython Repo for the new repository.

        Raises:
            RepositoryInitError: If git is not installed or ``git init`` fails.
        """
        try:
            git = _import_git()
        except ImportError as e:
            raise RepositoryInitError(project_dir, e) from e

        try:
            repo = git.Repo.init(project_dir)
        except (git.exc.GitCommandNotFound, git.exc.GitCommandError) as e:
            raise RepositoryInitError(project_dir, e) from e
        logger.info("Initialized git repository in %s", repo.git_dir)
        return repo
