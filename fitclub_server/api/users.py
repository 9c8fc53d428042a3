# fitclub_server/api/users.py

from typing import Literal
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session
from fitclub_server.api.deps import get_current_identity
from fitclub_server.core.errors import bad_request
from fitclub_server.core.security import Identity
from fitclub_server.database import get_db
from fitclub_server.models import User


router = APIRouter(prefix="/api/users", tags=["users"])

REQUIRED_FIELDS = ("name", "language")


class ProfileUpdate(BaseModel):
    """
    Editable profile fields. Role and email are never accepted here.
    Sending null clears an optional field.
    """
    model_config = ConfigDict(allow_inf_nan=False)

    name: str | None = None
    language: Literal["pt", "en", "es"] | None = None
    goal: str | None = None
    weight: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    photo_url: str | None = None


def _load_user(db: Session, identity: Identity) -> User:
    user = db.get(User, identity.id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/me")
def read_me(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    return _load_user(db, identity).to_public()


@router.put("/me")
def update_me(
    req: ProfileUpdate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    user = _load_user(db, identity)
    changes = req.model_dump(exclude_unset=True)
    for field in REQUIRED_FIELDS:
        if field in changes and changes[field] is None:
            raise bad_request(f"{field} cannot be null.")

    for field, value in changes.items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return user.to_public()
