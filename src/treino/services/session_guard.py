"""Gatekeeper for views that need a logged-in user."""

import logging
import time
from typing import Callable

from ..clients.base import KeyValueStore, Navigator, TokenCodec
from ..config import LOGIN_ROUTE, TOKEN_KEY
from ..errors import TokenDecodeError
from ..models.session import Session

logger = logging.getLogger(__name__)


class SessionGuard:
    """Reads, validates and evicts the persisted session token.

    Eviction is the only write the guard performs; tokens are written by
    the login flow.
    """

    def __init__(
        self,
        store: KeyValueStore,
        codec: TokenCodec,
        navigator: Navigator | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.codec = codec
        self.navigator = navigator
        self.clock = clock

    def check_session(self) -> Session | None:
        """Return the current session, or None if there is no valid one.

        A token that fails to decode or has expired is evicted.
        """
        token = self.store.get(TOKEN_KEY)
        if not token:
            return None

        try:
            session = Session.from_claims(token, self.codec.decode(token))
        except TokenDecodeError as e:
            logger.warning("Evicting undecodable token: %s", e)
            self.evict()
            return None

        if session.is_expired(self.clock()):
            logger.info("Evicting expired token (exp=%s)", session.expires_at)
            self.evict()
            return None

        return session

    def require_session(self) -> Session | None:
        """Check the session and redirect to login when there is none."""
        session = self.check_session()
        if session is None:
            self.redirect_to_login()
        return session

    def evict(self) -> None:
        """Remove the persisted token."""
        self.store.remove(TOKEN_KEY)

    def redirect_to_login(self) -> None:
        if self.navigator is not None:
            self.navigator.go_to(LOGIN_ROUTE)

    def reject(self) -> None:
        """Handle a 401 from the API: evict the token and force re-login."""
        logger.info("Server rejected the session token")
        self.evict()
        self.redirect_to_login()
