"""Loading a saved workout into the edit flow."""

import logging

from ..clients.api import TreinoApi
from ..errors import AuthError, TreinoError
from ..models.workout import Workout
from .drafts import DraftEditor
from .messages import describe_error
from .session_guard import SessionGuard

logger = logging.getLogger(__name__)

NOT_FOUND = "Treino não encontrado"
LOAD_FAILED = "Erro ao carregar treino. Tente novamente."


async def load_for_edit(
    api: TreinoApi, guard: SessionGuard, workout_id: str
) -> tuple[Workout | None, DraftEditor | None, str | None]:
    """Fetch a workout and open an editor on a copy of it.

    Returns:
        (workout, editor, error). On failure workout and editor are None
        and error holds the message to show (None after a redirect).
    """
    session = guard.require_session()
    if session is None or not workout_id:
        return None, None, None

    try:
        workout = await api.get_workout(session, workout_id)
    except AuthError:
        guard.reject()
        return None, None, None
    except TreinoError as e:
        logger.error("Failed to load workout %s: %r", workout_id, e)
        return None, None, describe_error(e, fallback=LOAD_FAILED, not_found=NOT_FOUND)

    return workout, DraftEditor(workout.to_draft()), None
