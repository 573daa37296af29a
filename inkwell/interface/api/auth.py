"""Request authentication helpers."""

from fastapi import Cookie, Header


def get_auth_token(
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> str | None:
    """Return the raw JWT from the ``auth_token`` cookie or a Bearer header.

    The cookie wins when both are present. Verification happens in
    ``JWTService``; this only locates the token.
    """
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip()
    return None
