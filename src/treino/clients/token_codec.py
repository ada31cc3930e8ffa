"""Bearer token decoding built on PyJWT."""

import jwt

from ..errors import TokenDecodeError


class JwtTokenCodec:
    """Reads the claims of a JWT without verifying its signature.

    The signing key lives on the server; the client only needs the
    claims (user id, expiry) and leaves verification to the API.
    """

    def decode(self, token: str) -> dict:
        """Decode a token into its claims."""
        try:
            return jwt.decode(token, options={"verify_signature": False})
        except jwt.PyJWTError as e:
            raise TokenDecodeError(f"Invalid token: {e}") from e
