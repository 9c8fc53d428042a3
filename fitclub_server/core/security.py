# fitclub_server/core/security.py

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext


ALGORITHM = "HS256"

# Stored in place of a hash for accounts created through Google sign-in.
OAUTH_PASSWORD_MARKER = "!oauth-user"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class InvalidTokenError(Exception):
    pass


@dataclass(frozen=True)
class Identity:
    id: int
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


# -------------------------------
# Passwords
# -------------------------------

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not plain_password or not hashed_password or hashed_password == OAUTH_PASSWORD_MARKER:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Unrecognised hash format
        return False


# -------------------------------
# Tokens
# -------------------------------

def create_access_token(identity: Identity, secret: str, expires_minutes: int | None = None) -> str:
    """
    Signs a bearer token carrying the user's id, email and role.
    An `exp` claim is only added when an expiry is configured.
    """
    to_encode = {"id": identity.id, "email": identity.email, "role": identity.role}
    if expires_minutes:
        expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
        to_encode["exp"] = int(expire.timestamp())
    return jwt.encode(to_encode, secret, algorithm=ALGORITHM)


def decode_access_token(token: str, secret: str) -> Identity:
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    user_id = payload.get("id")
    email = payload.get("email")
    role = payload.get("role")
    if user_id is None or not email or not role:
        raise InvalidTokenError("Token is missing identity claims")

    try:
        return Identity(id=int(user_id), email=str(email), role=str(role))
    except (TypeError, ValueError) as e:
        raise InvalidTokenError("Token id claim is not an integer") from e
