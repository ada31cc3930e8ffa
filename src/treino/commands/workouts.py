"""Workout commands: list, show, create, edit, delete."""

import click

from ..clients.prompts import WorkoutFormPrompter
from ..errors import NotFoundError, ValidationError
from ..models.workout import format_date_br
from ..services.drafts import DraftEditor
from ..services.submission import (
    SubmissionFlow,
    SubmissionState,
    WorkoutSubmissionController,
)
from ..services.workout_list import WorkoutListController
from ..services.workout_loader import load_for_edit
from ..utils.exercise_utils import parse_exercise_spec
from .base import (
    async_command,
    build_services,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    format_table,
)


@click.group()
def workouts():
    """Manage your workouts.

    Commands for listing, viewing, creating, editing and deleting workouts.
    """
    pass


@workouts.command(name="list")
@click.option("--date", "date_filter", default="", help="Only workouts whose date contains this text")
@click.option("--title", "title_filter", default="", help="Only workouts whose title contains this text")
@click.pass_context
@async_command
async def list_workouts(ctx: click.Context, date_filter: str, title_filter: str):
    """List your workouts, most recent first."""
    services = build_services(ctx)
    controller = WorkoutListController(services.api, services.guard)

    if not await controller.load():
        if controller.error:
            echo_error(controller.error)
        ctx.exit(1)

    visible = controller.visible(date_filter, title_filter)
    if not visible:
        echo_info(controller.empty_message())
        return

    headers = ["ID", "Data", "Título", "Exercícios"]
    rows = []
    for workout in visible:
        rows.append([
            workout.id,
            format_date_br(workout.date),
            workout.title[:30] + "..." if len(workout.title) > 30 else workout.title,
            str(len(workout.exercises)),
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(visible)} treino(s)")


@workouts.command()
@click.argument("workout_id")
@click.pass_context
@async_command
async def show(ctx: click.Context, workout_id: str):
    """Show the details of a workout."""
    services = build_services(ctx)
    workout, _, error = await load_for_edit(services.api, services.guard, workout_id)
    if workout is None:
        if error:
            echo_error(error)
        ctx.exit(1)

    click.echo()
    click.echo(workout.get_summary())


@workouts.command()
@click.option("--title", "-t", help="Workout title")
@click.option("--date", "-d", "date_value", default="", help="Date (YYYY-MM-DD), defaults to today")
@click.option(
    "--exercise",
    "-e",
    "exercises",
    multiple=True,
    help="Exercise as NAME:SETSxREPS[@WEIGHT][#NOTES]; repeatable",
)
@click.pass_context
@async_command
async def create(ctx: click.Context, title: str | None, date_value: str, exercises: tuple[str, ...]):
    """Register a new workout.

    Without --exercise an interactive form is opened, with --title
    pre-filled.

    Example:

        treino workouts create -t "Peito" -e "Supino:4x8@60" -e "Crucifixo:3x12"
    """
    services = build_services(ctx)
    if services.guard.require_session() is None:
        ctx.exit(1)

    editor = DraftEditor()
    if exercises:
        try:
            editor.update_title(title or "")
            editor.update_date(date_value)
            for spec in exercises:
                editor.add_exercise(parse_exercise_spec(spec))
        except (ValidationError, ValueError) as e:
            echo_error(getattr(e, "message", None) or str(e))
            ctx.exit(1)
    elif not await WorkoutFormPrompter().fill_new(editor, title=title or ""):
        echo_info("Cancelado")
        return

    controller = WorkoutSubmissionController(
        services.api,
        services.guard,
        services.navigator,
        editor,
        flow=SubmissionFlow.CREATE,
        success_delay=0,
    )
    outcome = await controller.submit()
    if outcome != SubmissionState.SUCCESS:
        if controller.error:
            echo_error(controller.error)
        ctx.exit(1)

    echo_success("Treino criado com sucesso!")


@workouts.command()
@click.argument("workout_id")
@click.pass_context
@async_command
async def edit(ctx: click.Context, workout_id: str):
    """Edit a workout interactively."""
    services = build_services(ctx)
    workout, editor, error = await load_for_edit(services.api, services.guard, workout_id)
    if editor is None:
        if error:
            echo_error(error)
        ctx.exit(1)

    click.echo(click.style(f"Editar Treino: {workout.title}", bold=True))

    controller = WorkoutSubmissionController(
        services.api,
        services.guard,
        services.navigator,
        editor,
        flow=SubmissionFlow.EDIT,
        workout_id=workout_id,
        success_delay=0,
    )
    prompter = WorkoutFormPrompter()

    while True:
        if not await prompter.edit(editor):
            echo_info("Alterações descartadas")
            return

        outcome = await controller.submit()
        if outcome == SubmissionState.SUCCESS:
            echo_success(controller.message or "")
            return
        if controller.errors:
            echo_error(controller.error or "")
            echo_warning("Corrija os problemas e tente novamente.")
            continue
        if outcome == SubmissionState.FAILED:
            echo_error(controller.error or "")
            if isinstance(controller.failure, NotFoundError):
                ctx.exit(1)
            echo_warning("Tente novamente.")
            continue
        # Session missing or rejected: already sent to login
        ctx.exit(1)


@workouts.command()
@click.argument("workout_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx: click.Context, workout_id: str, force: bool):
    """Delete a workout."""
    services = build_services(ctx)
    controller = WorkoutListController(services.api, services.guard)

    if not force and not click.confirm("Tem certeza que deseja excluir este treino?"):
        echo_info("Cancelado")
        return

    if not await controller.delete(workout_id):
        if controller.error:
            echo_error(controller.error)
        ctx.exit(1)

    echo_success(controller.message or "")
