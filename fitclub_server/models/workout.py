# fitclub_server/models/workout.py

from sqlalchemy import Column, Integer, String, Text, ForeignKey
from . import Base


class Workout(Base):
    __tablename__ = "workouts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    type = Column(String)
    category = Column(String)
    video_url = Column(String)
    duration = Column(String)
    series = Column(String)
    description = Column(Text)
    tips = Column(Text)
    order_index = Column(Integer, default=0, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "category": self.category,
            "video_url": self.video_url,
            "duration": self.duration,
            "series": self.series,
            "description": self.description,
            "tips": self.tips,
            "order_index": self.order_index,
        }


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True, index=True)
    workout_id = Column(Integer, ForeignKey("workouts.id"), index=True, nullable=False)
    name = Column(String, nullable=False)
    video_url = Column(String)
    description = Column(Text)
    tips = Column(Text)
    order_index = Column(Integer, default=0)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "workout_id": self.workout_id,
            "name": self.name,
            "video_url": self.video_url,
            "description": self.description,
            "tips": self.tips,
            "order_index": self.order_index,
        }


class Challenge(Base):
    __tablename__ = "challenges"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text)
    image_url = Column(String)
    duration_days = Column(Integer)
    order_index = Column(Integer, default=0)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "image_url": self.image_url,
            "duration_days": self.duration_days,
            "order_index": self.order_index,
        }
