"""Listing, filtering and deleting saved workouts."""

import logging
from datetime import datetime, timezone
from typing import Iterable

from ..clients.api import TreinoApi
from ..errors import AuthError, TreinoError
from ..models.workout import Workout, parse_workout_date
from .messages import describe_error
from .session_guard import SessionGuard

logger = logging.getLogger(__name__)

LOAD_FAILED = "Erro ao carregar treinos"
DELETE_FAILED = "Erro ao excluir treino"
DELETE_SUCCESS = "Treino excluído com sucesso!"
NO_WORKOUTS = "Você ainda não registrou nenhum treino."
NO_MATCHES = "Nenhum treino encontrado com os filtros atuais."
CONNECTION_ERROR = "Erro de conexão. Verifique sua internet e tente novamente."

# Unparseable dates sort after every real date
_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _sort_key(workout: Workout) -> datetime:
    return parse_workout_date(workout.date) or _OLDEST


def filter_workouts(
    workouts: Iterable[Workout],
    date_substring: str = "",
    title_substring: str = "",
) -> list[Workout]:
    """Filter workouts and order them most recent first.

    A workout matches when its date string contains `date_substring` and
    its title contains `title_substring` ignoring case. Empty filters
    match everything. Workouts on the same date keep their input order.
    """
    needle = title_substring.casefold()
    matches = [
        workout
        for workout in workouts
        if (not date_substring or date_substring in workout.date)
        and (not needle or needle in workout.title.casefold())
    ]
    return sorted(matches, key=_sort_key, reverse=True)


class WorkoutListController:
    """Holds the user's workouts for the list view."""

    def __init__(self, api: TreinoApi, guard: SessionGuard):
        self.api = api
        self.guard = guard
        self.workouts: list[Workout] = []
        self.error: str | None = None
        self.message: str | None = None
        self.is_loading = False

    async def load(self) -> bool:
        """Fetch the workouts owned by the logged-in user."""
        self.error = None
        session = self.guard.require_session()
        if session is None:
            return False
        if not session.user_id:
            # A token without a user id cannot list anything
            self.guard.reject()
            return False

        self.is_loading = True
        try:
            self.workouts = await self.api.list_workouts(session, session.user_id)
        except AuthError:
            self.guard.reject()
            return False
        except TreinoError as e:
            logger.error("Failed to load workouts: %r", e)
            self.error = describe_error(e, fallback=LOAD_FAILED, connection=CONNECTION_ERROR)
            return False
        finally:
            self.is_loading = False
        return True

    def visible(self, date_substring: str = "", title_substring: str = "") -> list[Workout]:
        return filter_workouts(self.workouts, date_substring, title_substring)

    def empty_message(self) -> str:
        """Message for an empty result, depending on whether filters hid everything."""
        return NO_WORKOUTS if not self.workouts else NO_MATCHES

    async def delete(self, workout_id: str) -> bool:
        """Delete a workout and drop it from the cached list."""
        self.error = None
        self.message = None
        session = self.guard.require_session()
        if session is None:
            return False

        try:
            await self.api.delete_workout(session, workout_id)
        except AuthError:
            self.guard.reject()
            return False
        except TreinoError as e:
            logger.error("Failed to delete workout %s: %r", workout_id, e)
            self.error = describe_error(e, fallback=DELETE_FAILED, connection=CONNECTION_ERROR)
            return False

        self.workouts = [w for w in self.workouts if w.id != workout_id]
        self.message = DELETE_SUCCESS
        return True
