# fitclub_server/api/deps.py

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from fitclub_server.core.errors import forbidden, unauthorized
from fitclub_server.core.security import Identity, InvalidTokenError, decode_access_token
from fitclub_server.database import get_db
from fitclub_server.models import User


bearer_scheme = HTTPBearer(auto_error=False)


def get_current_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity:
    """
    Verifies the bearer token and attaches the decoded identity
    to `request.state.identity` for downstream handlers.
    """
    if credentials is None or not credentials.credentials:
        raise unauthorized("Unauthorized")

    settings = request.app.state.settings
    try:
        identity = decode_access_token(credentials.credentials, settings.jwt_secret)
    except InvalidTokenError:
        raise unauthorized("Invalid token")

    request.state.identity = identity
    return identity


def require_admin(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> Identity:
    if not identity.is_admin:
        raise forbidden()

    # The stored role must still be admin.
    user = db.get(User, identity.id)
    if user is None or user.role != "admin":
        raise forbidden()
    return identity
