import os
import sys
from pathlib import Path
from typing import Optional

import click

from gitime import __version__
from gitime.config.settings import Settings, get_settings
from gitime.errors import GitimeError, WorkingDirectoryError
from gitime.services import TimestampSynchronizer, create_git_history_from_settings


def resolve_repo_path(root: Optional[str], settings: Settings) -> Path:
    """Pick the repository root: argument, then settings, then cwd."""
    if root:
        return Path(root)
    if settings.GITIME_REPO_PATH:
        return Path(settings.GITIME_REPO_PATH)
    try:
        return Path(os.getcwd())
    except OSError as e:
        raise WorkingDirectoryError(f"Error getting working directory: {e}") from e


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("root", required=False, type=click.Path(file_okay=False))
@click.option("--debug", is_flag=True, help="Print each git command before running it")
@click.version_option(version=__version__, prog_name="gitime")
def cli(root: Optional[str], debug: bool) -> None:
    """Set file mtimes in a git working tree to their latest commit date.

    ROOT defaults to the current directory and must be the top of the
    working tree.
    """
    settings = get_settings()
    if debug:
        settings = settings.model_copy(update={"GITIME_DEBUG": True})

    try:
        repo_path = resolve_repo_path(root, settings)
        git_history = create_git_history_from_settings(settings, repo_path)
        result = TimestampSynchronizer(repo_path, git_history).sync()
    except GitimeError as e:
        click.echo(f"Error: {e}", err=True)
        if isinstance(e, WorkingDirectoryError):
            click.echo("Usage: cd <git-dir> && gitime", err=True)
        sys.exit(1)

    print(
        f"Updated {result.files_updated} file(s) from "
        f"{result.commits_processed} commit(s), "
        f"skipped {len(result.skipped_paths)} missing path(s)"
    )


if __name__ == "__main__":
    cli()
