# fitclub_server/models/progress.py

from sqlalchemy import Column, Integer, Float, Date, ForeignKey, UniqueConstraint
from . import Base


class Progress(Base):
    """
    One row per member per calendar day.
    Water intake is accumulated in millilitres.
    """
    __tablename__ = "progress"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_progress_user_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    date = Column(Date, nullable=False)
    weight = Column(Float, nullable=True)
    water_intake = Column(Integer, nullable=False, default=0)
    workout_completed_id = Column(Integer, ForeignKey("workouts.id"), nullable=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date.isoformat(),
            "weight": self.weight,
            "water_intake": self.water_intake,
            "workout_completed_id": self.workout_completed_id,
        }
