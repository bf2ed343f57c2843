import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from curation_api.core.security import verify_access_token
from curation_api.db.session import get_session
from curation_api.models.user import User
from curation_api.services import user_service
from curation_api.utils.redaction import redact_secrets

logger = logging.getLogger("curation_api.api.deps")

bearer_scheme = HTTPBearer(auto_error=False)


async def get_db() -> AsyncSession:
    async for session in get_session():
        yield session


async def get_current_user(
    request: Request,
    session: AsyncSession = Depends(get_db),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> User:
    subject = getattr(request.state, "principal", None)
    if subject is None and credentials is not None:
        subject = verify_access_token(credentials.credentials)
    if not subject:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        user = await user_service.get_user_by_id(session, subject)
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("User lookup failed for principal %s: %s", subject, redact_secrets(str(exc)))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Data store unavailable"
        ) from exc
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user
