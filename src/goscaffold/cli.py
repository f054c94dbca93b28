"""Click command for the goscaffold CLI."""

import sys

import click

from goscaffold.errors import ScaffoldError
from goscaffold.logging_config import setup_logging
from goscaffold.repository import GitRepositoryInitializer
from goscaffold.scaffold import ProjectScaffolder
from goscaffold.scaffold_opts import ScaffoldOpts


@click.command("goscaffold")
@click.argument("project_name")
def main(project_name):
    """Create a new Go project named PROJECT_NAME in the current directory."""
    setup_logging()
    opts = ScaffoldOpts(project_name=project_name)
    scaffolder = ProjectScaffolder(GitRepositoryInitializer())
    try:
        scaffolder.create(opts)
    except ScaffoldError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Project {project_name} has been created successfully!")
