# fitclub_server/models/user.py

from datetime import datetime
from sqlalchemy import Column, Integer, String, Float, DateTime
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for club members and administrators.
    `password` holds a bcrypt hash, or the OAuth marker for accounts
    created through Google sign-in.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    name = Column(String, nullable=False, default="")
    role = Column(String, nullable=False, default="user")
    language = Column(String, nullable=False, default="pt")
    goal = Column(String, nullable=True)
    weight = Column(Float, nullable=True)
    height = Column(Float, nullable=True)
    photo_url = Column(String, nullable=True)
    oauth_id = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.now)

    def to_public(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role,
            "language": self.language,
            "goal": self.goal,
            "weight": self.weight,
            "height": self.height,
            "photo_url": self.photo_url,
        }
