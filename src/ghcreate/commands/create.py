from __future__ import annotations
import logging
from pathlib import Path
import webbrowser
import click
from .. import git
from ..clack import ConfigurableCommand
from ..errors import GHCreateError
from ..hosts import HostSettings
from ..util import copy_to_clipboard, cpe_no_tb
from ..workflow import CreateOptions, execute

log = logging.getLogger(__name__)


@click.command(
    cls=ConfigurableCommand,
    allow_config=["private", "browse", "copy"],
    # `-h` is taken by `--homepage`
    context_settings={"help_option_names": ["--help"]},
)
@click.option("-p", "--private", is_flag=True, help="Create a private repository")
@click.option(
    "-d",
    "--description",
    metavar="DESCRIPTION",
    help="A short description of the GitHub repository",
)
@click.option(
    "-h",
    "--homepage",
    metavar="URL",
    help="A URL with more information about the repository",
)
@click.option(
    "-o", "--browse", is_flag=True, help="Open the new repository in a web browser"
)
@click.option(
    "-c",
    "--copy",
    is_flag=True,
    help="Put the URL of the new repository on the clipboard instead of printing it",
)
@click.option(
    "-n",
    "--dry-run",
    is_flag=True,
    help="Show what would be done without creating anything",
)
@click.argument("name", required=False, metavar="[ORGANIZATION/]NAME")
@click.pass_obj
@cpe_no_tb
def cli(
    settings: HostSettings | None,
    name: str | None,
    private: bool,
    description: str | None,
    homepage: str | None,
    browse: bool,
    copy: bool,
    dry_run: bool,
) -> None:
    """
    Create a repository on GitHub and add a git remote for it.

    The repository is named NAME (default: the name of the current working
    directory), optionally within ORGANIZATION.  If a matching repository
    already exists, it is reused instead.
    """
    options = CreateOptions(
        private=private,
        description=description,
        homepage=homepage,
        browse=browse,
        copy=copy,
        dry_run=dry_run,
    )
    if settings is None:
        settings = HostSettings.from_config({})
    try:
        outcome = execute(git.Git(dirpath=Path()), name, options, settings)
    except GHCreateError as e:
        raise click.ClickException(str(e))
    if outcome.created:
        log.info("Created repository %s", outcome.identity)
    show_url(outcome.url, browse=options.browse, copy=options.copy)


def show_url(url: str, browse: bool = False, copy: bool = False) -> None:
    if browse:
        log.info("Opening %s in web browser", url)
        webbrowser.open(url)
    if copy:
        try:
            copy_to_clipboard(url)
        except RuntimeError as e:
            log.warning("Could not copy URL to clipboard: %s", e)
            click.echo(url)
    elif not browse:
        click.echo(url)
