"""CLI entry point for treino."""

from pathlib import Path

import click

from . import __version__
from .commands import login, logout, register, whoami, workouts
from .commands.base import Settings, configure_logging
from .config import DEFAULT_API_URL


@click.group()
@click.version_option(version=__version__, prog_name="treino")
@click.option(
    "--api-url",
    envvar="TREINO_API_URL",
    default=DEFAULT_API_URL,
    show_default=True,
    help="Base URL of the workout API",
)
@click.option(
    "--data-dir",
    envvar="TREINO_DATA_DIR",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding the stored session (default: ~/.treino)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log requests and state changes")
@click.pass_context
def main(ctx: click.Context, api_url: str, data_dir: Path | None, verbose: bool):
    """treino: log your workouts from the terminal.

    Register, log in, and create, browse, edit or delete workouts stored
    on the Treino API.

    Example usage:

        # Create an account and log in
        treino register
        treino login

        # Register a workout
        treino workouts create -t "Pernas" -e "Agachamento:4x8@80"

        # Browse and edit
        treino workouts list --title pernas
        treino workouts edit <id>
    """
    configure_logging(verbose)
    ctx.obj = Settings(api_url=api_url, data_dir=data_dir, verbose=verbose)


# Register commands
main.add_command(register)
main.add_command(login)
main.add_command(logout)
main.add_command(whoami)
main.add_command(workouts)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
