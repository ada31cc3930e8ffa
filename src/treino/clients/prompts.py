"""Interactive workout forms via questionary."""

import click
import questionary
from questionary import Style

from ..errors import ValidationError
from ..models.workout import Exercise
from ..services.drafts import DraftEditor
from ..utils.exercise_utils import parse_number

# Custom style for the forms
custom_style = Style(
    [
        ("qmark", "fg:#1e88e5 bold"),
        ("question", "bold"),
        ("answer", "fg:#43a047 bold"),
        ("pointer", "fg:#1e88e5 bold"),
        ("highlighted", "fg:#1e88e5 bold"),
        ("selected", "fg:#43a047"),
        ("separator", "fg:#757575"),
        ("instruction", ""),
        ("text", ""),
        ("disabled", "fg:#9e9e9e italic"),
    ]
)

DISCARD_CONFIRMATION = "Tem alterações não salvas. Deseja realmente cancelar?"


def _show_error(message: str) -> None:
    click.echo(click.style("[ERRO] ", fg="red") + message)


def _validate_int(text: str) -> bool | str:
    return parse_number(text, int) is not None or "Informe um número inteiro"


def _validate_weight(text: str) -> bool | str:
    if not text.strip():
        return True
    return parse_number(text, float) is not None or "Informe um número"


class WorkoutFormPrompter:
    """Terminal version of the workout creation and edit forms.

    All edits go through the DraftEditor, so validation and change
    tracking are the same as for any other front end.
    """

    async def _ask_exercise(self, base: Exercise) -> Exercise | None:
        name = await questionary.text(
            "Nome do exercício:", default=base.name, style=custom_style
        ).ask_async()
        if name is None:
            return None

        sets = await questionary.text(
            "Séries:", default=str(base.sets), validate=_validate_int, style=custom_style
        ).ask_async()
        if sets is None:
            return None

        reps = await questionary.text(
            "Repetições:", default=str(base.reps), validate=_validate_int, style=custom_style
        ).ask_async()
        if reps is None:
            return None

        weight = await questionary.text(
            "Peso em kg (opcional):",
            default="" if base.weight is None else f"{base.weight:g}",
            validate=_validate_weight,
            style=custom_style,
        ).ask_async()
        if weight is None:
            return None

        notes = await questionary.text(
            "Observações (opcional):", default=base.notes, style=custom_style
        ).ask_async()

        return Exercise(
            name=name,
            sets=parse_number(sets, int),
            reps=parse_number(reps, int),
            weight=parse_number(weight, float),
            notes=notes or "",
        )

    async def _ask_date(self, editor: DraftEditor) -> None:
        value = await questionary.text(
            "Data (AAAA-MM-DD):", default=editor.draft.date, style=custom_style
        ).ask_async()
        if value is None:
            return
        try:
            editor.update_date(value)
        except ValidationError as e:
            _show_error(e.message)

    async def fill_new(self, editor: DraftEditor, title: str = "") -> bool:
        """Run the creation form. Returns False if the user aborted.

        `title` pre-fills the title prompt.
        """
        click.echo("\n=== Criar Novo Treino ===\n")

        title = await questionary.text(
            "Título do treino:", default=title, style=custom_style
        ).ask_async()
        if title is None:
            return False
        editor.update_title(title)
        await self._ask_date(editor)

        while True:
            click.echo(f"\nExercício {len(editor.draft.exercises) + 1}")
            exercise = await self._ask_exercise(editor.entry)
            if exercise is None:
                return False

            editor.update_entry(
                name=exercise.name,
                sets=exercise.sets,
                reps=exercise.reps,
                weight=exercise.weight,
                notes=exercise.notes,
            )
            try:
                editor.commit_entry()
            except ValidationError as e:
                _show_error(e.message)
                continue

            add_more = await questionary.confirm(
                "Adicionar outro exercício?", default=False, style=custom_style
            ).ask_async()
            if not add_more:
                return True

    async def _pick_exercise(self, editor: DraftEditor, prompt: str) -> int | None:
        if not editor.draft.exercises:
            _show_error("Nenhum exercício adicionado")
            return None
        return await questionary.select(
            prompt,
            choices=[
                questionary.Choice(
                    f"{index + 1}. {exercise.get_summary() if exercise.name else '(sem nome)'}",
                    index,
                )
                for index, exercise in enumerate(editor.draft.exercises)
            ],
            style=custom_style,
        ).ask_async()

    def _show_draft(self, editor: DraftEditor) -> None:
        draft = editor.draft
        click.echo()
        click.echo(click.style(f"Título: {draft.title}", bold=True))
        click.echo(f"Data: {draft.date}")
        if not draft.exercises:
            click.echo("  Nenhum exercício adicionado")
        for index, exercise in enumerate(draft.exercises, 1):
            click.echo(f"  {index}. {exercise.get_summary()}")
        click.echo()

    async def edit(self, editor: DraftEditor) -> bool:
        """Run the edit form until the user saves or cancels.

        Returns:
            True to save, False to leave without saving
        """
        while True:
            self._show_draft(editor)
            no_changes = None if editor.has_unsaved_changes else "nenhuma alteração"
            action = await questionary.select(
                "O que deseja fazer?",
                choices=[
                    questionary.Choice("Alterar título", "title"),
                    questionary.Choice("Alterar data", "date"),
                    questionary.Choice("Adicionar exercício", "add"),
                    questionary.Choice("Editar exercício", "edit"),
                    questionary.Choice("Remover exercício", "remove"),
                    questionary.Choice("Desfazer", "undo", disabled=no_changes),
                    questionary.Choice("Salvar alterações", "save", disabled=no_changes),
                    questionary.Choice("Cancelar", "cancel"),
                ],
                style=custom_style,
            ).ask_async()

            if action in (None, "cancel"):
                if not editor.has_unsaved_changes:
                    return False
                discard = await questionary.confirm(
                    DISCARD_CONFIRMATION, default=False, style=custom_style
                ).ask_async()
                if discard:
                    return False
            elif action == "save":
                return True
            elif action == "undo":
                editor.undo()
            elif action == "title":
                title = await questionary.text(
                    "Título do treino:", default=editor.draft.title, style=custom_style
                ).ask_async()
                if title is not None:
                    editor.update_title(title)
            elif action == "date":
                await self._ask_date(editor)
            elif action == "add":
                editor.append_blank_exercise()
                index = len(editor.draft.exercises) - 1
                if not await self._edit_exercise(editor, index):
                    editor.undo()
            elif action == "edit":
                index = await self._pick_exercise(editor, "Qual exercício?")
                if index is not None:
                    await self._edit_exercise(editor, index)
            elif action == "remove":
                index = await self._pick_exercise(editor, "Remover qual exercício?")
                if index is not None:
                    editor.remove_exercise(index)

    async def _edit_exercise(self, editor: DraftEditor, index: int) -> bool:
        """Ask for new values of one exercise. Returns False if aborted."""
        exercise = await self._ask_exercise(editor.draft.exercises[index])
        if exercise is None:
            return False
        editor.update_exercise(
            index,
            name=exercise.name,
            sets=exercise.sets,
            reps=exercise.reps,
            weight=exercise.weight,
            notes=exercise.notes,
        )
        return True
