from __future__ import annotations

from jose import JWTError, jwt

from condo_admin.config import settings
from condo_admin.schemas.user import Principal


def decode_access_token(token: str) -> Principal | None:
    """Verify a token minted by the identity provider and read its claims."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    subject = payload.get("sub")
    if not subject:
        return None
    return Principal(
        subject=str(subject),
        email=payload.get("email"),
        role=payload.get("role"),
    )
