"""Session and credential models."""

from dataclasses import dataclass, field

from ..errors import TokenDecodeError


@dataclass(frozen=True)
class Credentials:
    """Account form input. Lives for a single request only."""

    email: str
    password: str
    name: str = ""

    def to_register_payload(self) -> dict:
        return {"name": self.name, "email": self.email, "password": self.password}

    def to_login_payload(self) -> dict:
        return {"email": self.email, "password": self.password}


@dataclass(frozen=True)
class Session:
    """A decoded bearer token.

    A session is valid only while it has no expiry claim or the claim
    lies in the future.
    """

    token: str
    user_id: str | None
    expires_at: float | None = None  # epoch seconds
    claims: dict = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_claims(cls, token: str, claims: dict) -> "Session":
        """Build a session from decoded token claims."""
        exp = claims.get("exp")
        if exp is not None and (isinstance(exp, bool) or not isinstance(exp, (int, float))):
            raise TokenDecodeError("Token expiry claim is not numeric")
        user_id = claims.get("userId")
        return cls(
            token=token,
            user_id=str(user_id) if user_id is not None else None,
            expires_at=exp,
            claims=dict(claims),
        )

    def is_expired(self, now: float) -> bool:
        """Check the expiry claim against `now` (epoch seconds)."""
        if self.expires_at is None:
            return False
        return self.expires_at * 1000 <= now * 1000

    @property
    def auth_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}
