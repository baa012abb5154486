"""
gitlocalstats: a contribution calendar for your local git repositories

Entry point for the application.
"""

import logging
import sys

import click

from gitlocalstats.cli import display_calendar, display_failures, display_found_folder
from gitlocalstats.config import get_window, validate_config
from gitlocalstats.history_calculator import calculate_history
from gitlocalstats.repo_scanner import ScanError, scan_git_folders
from gitlocalstats.storage import RepoListStorage


def usage() -> str:
    """Build the usage text shown when no command is given."""
    return (
        f"{click.style('gitlocalstats <cmd>', fg='bright_white')}\n"
        f"  {click.style('--add', fg='bright_green')}\t add a new folder to scan for Git repositories\n"
        f"  {click.style('--email', fg='bright_green')}\t the email to scan\n"
    )


def _open_storage() -> RepoListStorage:
    """Open the repository list, creating it on first use."""
    storage = RepoListStorage()
    if storage.ensure_file():
        click.echo(click.style(f"File created at: {storage.path}", fg="green"))
    return storage


def scan(folder: str) -> None:
    """Find repositories under a folder and add them to the stored list."""
    click.echo(click.style("Found folders:\n", fg="bright_green"))

    repos = scan_git_folders(folder)
    for repo in repos:
        display_found_folder(repo)

    storage = _open_storage()
    added = storage.add_repos(repos)

    click.echo(click.style(f"\nSuccessfully added! ({added} new)\n", fg="bright_green"))


def stats(email: str) -> None:
    """Print the contribution calendar of an author."""
    storage = _open_storage()
    result = calculate_history(email, storage.get_repos(), window=get_window())
    display_calendar(result)
    display_failures(result.failures)


@click.command()
@click.option("--add", "folder", help="add a new folder to scan for Git repositories")
@click.option("--email", help="the email to scan")
@click.option("--verbose", "-v", is_flag=True, help="show debug logging")
def main(folder: str | None, email: str | None, verbose: bool) -> None:
    """Build a contribution calendar from local git repositories."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        validate_config()
        if folder:
            scan(folder)
        elif email:
            stats(email)
        else:
            click.echo(usage(), err=True)
            sys.exit(1)
    except (ValueError, ScanError, OSError) as e:
        click.echo(click.style(f"{e}\n", fg="bright_red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
