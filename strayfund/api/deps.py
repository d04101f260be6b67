import secrets

from fastapi import Header, HTTPException, status

from strayfund.db.settings import get_settings


async def require_admin(x_admin_token: str | None = Header(default=None)) -> None:
    expected = get_settings().admin_token
    if not expected or x_admin_token is None or not secrets.compare_digest(x_admin_token, expected):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
