"""Conversion of client errors into user-facing messages."""

from ..errors import (
    ConflictError,
    NotFoundError,
    TransportError,
    TreinoError,
    ValidationError,
)

CONNECTION_ERROR = "Erro de conexão. Verifique sua internet e tente novamente."
SERVER_ERROR = "Ocorreu um erro no servidor. Tente novamente mais tarde."
UNEXPECTED_ERROR = "Ocorreu um erro inesperado"


def describe_error(
    error: TreinoError,
    fallback: str = SERVER_ERROR,
    not_found: str | None = None,
    conflict: str | None = None,
    connection: str = CONNECTION_ERROR,
) -> str:
    """Pick the single message a form shows for `error`.

    `not_found` and `conflict` are only used by the flows where those
    statuses have a meaning of their own; elsewhere they fall through to
    the server message or `fallback`.
    """
    if isinstance(error, ValidationError):
        return error.message
    if isinstance(error, NotFoundError) and not_found:
        return not_found
    if isinstance(error, ConflictError) and conflict:
        return conflict
    if isinstance(error, TransportError):
        return connection

    server_message = getattr(error, "server_message", None)
    if server_message:
        return server_message
    return fallback
