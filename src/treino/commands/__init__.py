"""CLI commands for treino."""

from .auth import login, logout, register, whoami
from .workouts import workouts

__all__ = [
    "login",
    "logout",
    "register",
    "whoami",
    "workouts",
]
