"""CLI interface for scriptree.

Reads the nearest package.json and prints how its scripts call each other.
"""

import json
import sys

import click
from dotenv import load_dotenv

# Load .env before reading SCRIPTREE_* settings
load_dotenv()

from scriptree import __version__, resolve_script_tree  # noqa: E402
from scriptree.config import ResolverOptions  # noqa: E402
from scriptree.errors import ScriptreeError  # noqa: E402
from scriptree.logging import set_log_level  # noqa: E402
from scriptree.models.scripts import ScriptTree  # noqa: E402

path_argument = click.argument(
    "path",
    default=".",
    type=click.Path(exists=True, resolve_path=True),
)
alpha_option = click.option(
    "-a", "--alpha", is_flag=True, help="Sort top-level scripts alphabetically"
)
prune_option = click.option(
    "-p", "--prune", is_flag=True, help="Hide hooks and namespaced sub-scripts from the top level"
)
depth_option = click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=None,
    help="Stop expanding children below this depth (default: unlimited)",
)


def _resolve(path: str, alpha: bool, prune: bool, max_depth: int | None) -> ScriptTree:
    """Load the manifest at path and resolve it, exiting on errors."""
    from scriptree.analyzers import load_scripts

    try:
        # Unset flags stay None so SCRIPTREE_* defaults apply
        options = ResolverOptions.from_env(
            alpha=alpha or None,
            prune=prune or None,
            max_depth=max_depth,
        )
        return resolve_script_tree(load_scripts(path), options)
    except ScriptreeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="scriptree")
@click.option("-v", "--verbose", is_flag=True, help="Log resolver details to stderr")
def cli(verbose: bool) -> None:
    """scriptree - show how package.json scripts call each other."""
    if verbose:
        set_log_level("DEBUG")


@cli.command()
@path_argument
@alpha_option
@prune_option
@depth_option
@click.option(
    "--color/--no-color",
    default=None,
    help="Colour labels (default: only when stdout is a terminal)",
)
def tree(path: str, alpha: bool, prune: bool, max_depth: int | None, color: bool | None) -> None:
    """Print the script tree.

    PATH: package.json or a directory inside the package (default: current directory).
    """
    from scriptree.render import make_styler, render_tree

    result = _resolve(path, alpha, prune, max_depth)
    style = make_styler(result.entries) if color is not False else None
    click.echo(render_tree(result.root, style), nl=False, color=color)


@cli.command(name="json")
@path_argument
@alpha_option
@prune_option
@depth_option
def json_command(path: str, alpha: bool, prune: bool, max_depth: int | None) -> None:
    """Print the script tree as JSON.

    PATH: package.json or a directory inside the package (default: current directory).
    """
    result = _resolve(path, alpha, prune, max_depth)
    click.echo(result.model_dump_json(indent=2, exclude_none=True))


@cli.command()
@path_argument
def cycles(path: str) -> None:
    """List scripts that invoke themselves directly or transitively.

    PATH: package.json or a directory inside the package (default: current directory).
    """
    result = _resolve(path, alpha=False, prune=False, max_depth=None)
    if result.cycles:
        click.echo(f"Found {len(result.cycles)} cycle(s)", err=True)
    click.echo(json.dumps({"cycles": result.cycles}, indent=2))


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
