# fitclub_server/api/auth.py

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from fitclub_server.core.errors import bad_request, internal_error, log_error, unauthorized
from fitclub_server.core.security import (
    OAUTH_PASSWORD_MARKER,
    Identity,
    create_access_token,
    get_password_hash,
    verify_password,
)
from fitclub_server.database import get_db
from fitclub_server.models import User


router = APIRouter(prefix="/api/auth", tags=["auth"])


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    email: str
    password: str
    name: str


class GoogleSyncRequest(BaseModel):
    id: str | int
    email: str
    name: str = ""


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def issue_session(request: Request, user: User) -> dict:
    """
    Builds the `{token, user}` payload returned by every sign-in route.
    """
    settings = request.app.state.settings
    identity = Identity(id=user.id, email=user.email, role=user.role)
    token = create_access_token(identity, settings.jwt_secret, settings.jwt_expire_minutes)
    return {"token": token, "user": user.to_public()}


@router.post("/login")
def login(req: LoginRequest, request: Request, db: Session = Depends(get_db)):
    try:
        user = db.query(User).filter(User.email == normalize_email(req.email)).first()
    except SQLAlchemyError as e:
        log_error("login", e)
        raise internal_error(f"Database error: {e}")

    if user is None:
        raise unauthorized("User not found. Please register.")
    if not verify_password(req.password, user.password):
        raise unauthorized("Wrong password.")

    return issue_session(request, user)


@router.post("/register")
def register(req: RegisterRequest, request: Request, db: Session = Depends(get_db)):
    email = normalize_email(req.email)
    if not email or not req.password:
        raise bad_request("Email and password are required.")

    if db.query(User).filter(User.email == email).first():
        raise bad_request("Email already registered.")

    user = User(email=email, password=get_password_hash(req.password), name=req.name.strip(), role="user")
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise bad_request("Email already registered.")
    db.refresh(user)

    return issue_session(request, user)


@router.post("/google")
def google_sync(req: GoogleSyncRequest, request: Request, db: Session = Depends(get_db)):
    """
    Links a Google identity to a local account, creating one on first sign-in.
    OAuth accounts carry a password marker that never verifies.
    """
    email = normalize_email(req.email)
    try:
        if not email:
            raise ValueError("email is required")

        user = db.query(User).filter(User.email == email).first()
        if user is None:
            user = User(
                email=email,
                name=req.name.strip(),
                role="user",
                password=OAUTH_PASSWORD_MARKER,
                oauth_id=str(req.id),
            )
            db.add(user)
            db.commit()
            db.refresh(user)
    except (SQLAlchemyError, ValueError) as e:
        db.rollback()
        log_error("google sync", e)
        raise internal_error(f"Failed to sync user: {e}")

    return issue_session(request, user)
