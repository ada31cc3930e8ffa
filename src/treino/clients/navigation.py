"""Navigation for the command-line front end."""

import click

from ..config import LOGIN_ROUTE, REGISTER_ROUTE, WORKOUT_CREATE_ROUTE, WORKOUT_LIST_ROUTE

# Route -> command that shows the corresponding view
ROUTE_COMMANDS = {
    LOGIN_ROUTE: "treino login",
    REGISTER_ROUTE: "treino register",
    WORKOUT_CREATE_ROUTE: "treino workouts create",
    WORKOUT_LIST_ROUTE: "treino workouts list",
}


class CliNavigator:
    """Records where the user was sent and tells them how to get there.

    A terminal cannot switch views by itself, so navigating prints the
    command that opens the target view.
    """

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.history: list[str] = []

    @property
    def current(self) -> str | None:
        return self.history[-1] if self.history else None

    def go_to(self, path: str) -> None:
        self.history.append(path)
        if self.quiet:
            return
        command = ROUTE_COMMANDS.get(path)
        if command:
            click.echo(click.style("-> ", fg="blue") + f"Next: {command}")
