"""Acting-user dependency for FastAPI.

Authentication happens upstream; the gateway forwards the authenticated user's
id in the ``X-User-Id`` header and every write is stamped with it.
"""

from typing import Annotated

from fastapi import Header, HTTPException, status


async def get_acting_user_id(
    x_user_id: Annotated[str | None, Header()] = None,
) -> int:
    """Get the acting user id, raising 401 if missing or malformed."""
    try:
        user_id = int(x_user_id) if x_user_id is not None else 0
    except ValueError:
        user_id = 0

    if user_id <= 0:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid acting user",
        )
    return user_id
