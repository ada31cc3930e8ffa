"""Submission of workout drafts to the API."""

import asyncio
import logging
from enum import Enum

from ..clients.api import TreinoApi
from ..clients.base import Navigator
from ..config import CREATE_SUCCESS_DELAY, EDIT_SUCCESS_DELAY, WORKOUT_LIST_ROUTE
from ..errors import AuthError, TreinoError
from .drafts import DraftEditor
from .messages import describe_error
from .session_guard import SessionGuard

logger = logging.getLogger(__name__)

CREATE_SUCCESS = "Treino criado com sucesso!"
CREATE_FAILED = "Erro ao criar treino"
EDIT_SUCCESS = "Treino atualizado com sucesso!"
EDIT_FAILED = "Erro ao atualizar treino. Verifique os dados e tente novamente."
EDIT_NOT_FOUND = "Treino não encontrado (o ID pode ser inválido)"
CONNECTION_ERROR = "Erro de conexão. Verifique sua internet e tente novamente."


class SubmissionState(str, Enum):
    """Submission lifecycle."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


class SubmissionFlow(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class WorkoutSubmissionController:
    """Sends the draft held by a DraftEditor and tracks the outcome.

    State machine: IDLE -> SUBMITTING -> SUCCESS | FAILED. SUCCESS returns
    to IDLE after the display delay (creation) or navigates back to the
    workout list (edit). FAILED returns to IDLE on the next attempt.
    A 401 evicts the session and returns straight to IDLE.
    """

    def __init__(
        self,
        api: TreinoApi,
        guard: SessionGuard,
        navigator: Navigator,
        editor: DraftEditor,
        flow: SubmissionFlow = SubmissionFlow.CREATE,
        workout_id: str | None = None,
        success_delay: float | None = None,
    ):
        if flow == SubmissionFlow.EDIT and not workout_id:
            raise ValueError("The edit flow needs a workout_id")

        self.api = api
        self.guard = guard
        self.navigator = navigator
        self.editor = editor
        self.flow = flow
        self.workout_id = workout_id
        if success_delay is None:
            success_delay = (
                CREATE_SUCCESS_DELAY if flow == SubmissionFlow.CREATE else EDIT_SUCCESS_DELAY
            )
        self.success_delay = success_delay

        self.state = SubmissionState.IDLE
        self.error: str | None = None
        self.errors: list[str] = []
        self.message: str | None = None
        self.failure: TreinoError | None = None
        self._live = True

    @property
    def can_submit(self) -> bool:
        """Whether the submit action is enabled.

        Disabled while a request is in flight, and in the edit flow while
        nothing has changed.
        """
        if self.state == SubmissionState.SUBMITTING:
            return False
        if self.flow == SubmissionFlow.EDIT and not self.editor.has_unsaved_changes:
            return False
        return True

    @property
    def is_live(self) -> bool:
        return self._live

    def close(self) -> None:
        """The view went away; late responses must not touch its state."""
        self._live = False

    async def submit(self) -> SubmissionState:
        """Validate and send the current draft.

        Returns:
            The outcome of this attempt: SUCCESS, FAILED, or IDLE when the
            attempt was aborted before reaching the server
        """
        if not self.can_submit:
            logger.debug("Submit ignored in state %s", self.state.value)
            return self.state

        self.state = SubmissionState.IDLE
        self.error = None
        self.errors = []
        self.message = None
        self.failure = None

        session = self.guard.require_session()
        if session is None:
            return self.state

        errors = self.editor.validate()
        if errors:
            self.errors = errors
            self.error = "\n".join(errors)
            return self.state

        draft = self.editor.draft
        self.state = SubmissionState.SUBMITTING
        try:
            if self.flow == SubmissionFlow.CREATE:
                await self.api.create_workout(session, draft)
            else:
                await self.api.update_workout(session, self.workout_id, draft)
        except AuthError:
            self.state = SubmissionState.IDLE
            self.guard.reject()
            return self.state
        except TreinoError as e:
            logger.error("Workout %s failed: %r", self.flow.value, e)
            if not self._live:
                return self.state
            self.state = SubmissionState.FAILED
            self.failure = e
            self.error = self._describe(e)
            return self.state

        if not self._live:
            logger.debug("Discarding result for a closed view")
            return self.state

        self.state = SubmissionState.SUCCESS
        if self.flow == SubmissionFlow.CREATE:
            self.message = CREATE_SUCCESS
            self.editor.reset()
        else:
            self.message = EDIT_SUCCESS
            self.editor.mark_saved()
        logger.info("Workout %s succeeded", self.flow.value)

        await asyncio.sleep(self.success_delay)
        if not self._live:
            return SubmissionState.SUCCESS

        self.state = SubmissionState.IDLE
        if self.flow == SubmissionFlow.CREATE:
            self.message = None
        else:
            self.navigator.go_to(WORKOUT_LIST_ROUTE)
        return SubmissionState.SUCCESS

    def _describe(self, error: TreinoError) -> str:
        if self.flow == SubmissionFlow.EDIT:
            return describe_error(
                error, fallback=EDIT_FAILED, not_found=EDIT_NOT_FOUND, connection=CONNECTION_ERROR
            )
        return describe_error(error, fallback=CREATE_FAILED, connection=CONNECTION_ERROR)
