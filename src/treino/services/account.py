"""Account forms: registration and login.

Both forms validate fail-fast: the first problem found is the only one
reported.
"""

import asyncio
import logging
import re

from ..clients.api import TreinoApi
from ..clients.base import KeyValueStore, Navigator
from ..config import LOGIN_ROUTE, REGISTER_SUCCESS_DELAY, TOKEN_KEY, WORKOUT_CREATE_ROUTE
from ..errors import AuthError, TreinoError
from ..models.session import Credentials
from .messages import describe_error

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

NAME_REQUIRED = "O nome é obrigatório"
INVALID_EMAIL = "Por favor, insira um email válido (exemplo@dominio.com)"
WEAK_PASSWORD = (
    "A senha deve conter pelo menos 8 caracteres, incluindo uma letra maiúscula, "
    "uma minúscula e um número."
)
PASSWORD_REQUIRED = "A senha é obrigatória"

REGISTER_SUCCESS = "Cadastro realizado com sucesso! Redirecionando para login..."
EMAIL_TAKEN = "Este email já está cadastrado."
REGISTER_CONNECTION_ERROR = "Erro de conexão. Verifique sua internet e tente novamente."
REGISTER_SERVER_ERROR = "Ocorreu um erro no servidor. Tente novamente mais tarde."

INVALID_CREDENTIALS = "Credenciais inválidas"
LOGIN_CONNECTION_ERROR = "Erro de conexão. Verifique sua internet."
LOGIN_SERVER_ERROR = "Erro no servidor. Tente novamente mais tarde."


def validate_email(email: str) -> bool:
    """Check for a `local@domain.tld` shape."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_password(password: str) -> bool:
    """Require 8+ characters with an uppercase letter, a lowercase letter and a digit."""
    return (
        len(password) >= 8
        and re.search(r"[A-Z]", password) is not None
        and re.search(r"[a-z]", password) is not None
        and re.search(r"[0-9]", password) is not None
    )


def validate_registration(fields: dict) -> list[str]:
    """Validate the registration form.

    Returns:
        An empty list if valid, otherwise a single message for the first failure
    """
    if not (fields.get("name") or "").strip():
        return [NAME_REQUIRED]
    if not validate_email(fields.get("email") or ""):
        return [INVALID_EMAIL]
    if not validate_password(fields.get("password") or ""):
        return [WEAK_PASSWORD]
    return []


def validate_login(fields: dict) -> list[str]:
    """Validate the login form (no strength rule, only presence and shape)."""
    if not validate_email(fields.get("email") or ""):
        return [INVALID_EMAIL]
    if not fields.get("password"):
        return [PASSWORD_REQUIRED]
    return []


class AccountController:
    """Drives the registration and login forms.

    Holds the form-level state a view renders: whether a request is in
    flight, the error to show and the success message.
    """

    def __init__(
        self,
        api: TreinoApi,
        store: KeyValueStore,
        navigator: Navigator,
        register_delay: float = REGISTER_SUCCESS_DELAY,
    ):
        self.api = api
        self.store = store
        self.navigator = navigator
        self.register_delay = register_delay
        self.is_loading = False
        self.error: str | None = None
        self.message: str | None = None

    def _begin(self) -> bool:
        if self.is_loading:
            logger.debug("Ignoring submit while a request is in flight")
            return False
        self.error = None
        self.message = None
        return True

    async def register(self, name: str, email: str, password: str) -> bool:
        """Submit the registration form. Returns True on success."""
        if not self._begin():
            return False

        errors = validate_registration({"name": name, "email": email, "password": password})
        if errors:
            self.error = errors[0]
            return False

        self.is_loading = True
        try:
            await self.api.register(Credentials(email=email, password=password, name=name))
        except TreinoError as e:
            logger.error("Registration failed: %r", e)
            self.error = describe_error(
                e,
                fallback=REGISTER_SERVER_ERROR,
                conflict=EMAIL_TAKEN,
                connection=REGISTER_CONNECTION_ERROR,
            )
            return False
        finally:
            self.is_loading = False

        self.message = REGISTER_SUCCESS
        await asyncio.sleep(self.register_delay)
        self.navigator.go_to(LOGIN_ROUTE)
        return True

    async def login(self, email: str, password: str) -> bool:
        """Submit the login form. On success the token is persisted."""
        if not self._begin():
            return False

        errors = validate_login({"email": email, "password": password})
        if errors:
            self.error = errors[0]
            return False

        self.is_loading = True
        try:
            token = await self.api.login(Credentials(email=email, password=password))
        except AuthError as e:
            logger.error("Login rejected: %r", e)
            self.error = INVALID_CREDENTIALS
            return False
        except TreinoError as e:
            logger.error("Login failed: %r", e)
            self.error = describe_error(
                e, fallback=LOGIN_SERVER_ERROR, connection=LOGIN_CONNECTION_ERROR
            )
            return False
        finally:
            self.is_loading = False

        self.store.set(TOKEN_KEY, token)
        self.navigator.go_to(WORKOUT_CREATE_ROUTE)
        return True

    def logout(self) -> None:
        """Forget the persisted session."""
        self.store.remove(TOKEN_KEY)
        self.navigator.go_to(LOGIN_ROUTE)
