# fitclub_server/api/content.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from fitclub_server.api.deps import get_current_identity
from fitclub_server.database import get_db
from fitclub_server.models import AppConfig, Challenge, Exercise, Workout


router = APIRouter(prefix="/api", tags=["content"])


# -------------------------------
# Public
# -------------------------------

@router.get("/config")
def get_config(db: Session = Depends(get_db)):
    """
    Returns the site configuration as a flat key -> value mapping.
    """
    return {row.key: row.value for row in db.query(AppConfig).all()}


# -------------------------------
# Members
# -------------------------------

@router.get("/workouts", dependencies=[Depends(get_current_identity)])
def list_workouts(db: Session = Depends(get_db)):
    workouts = db.query(Workout).order_by(Workout.order_index.asc(), Workout.id.asc()).all()
    return [w.to_dict() for w in workouts]


@router.get("/workouts/{workout_id}/exercises", dependencies=[Depends(get_current_identity)])
def list_exercises(workout_id: int, db: Session = Depends(get_db)):
    exercises = (
        db.query(Exercise)
        .filter(Exercise.workout_id == workout_id)
        .order_by(Exercise.order_index.asc(), Exercise.id.asc())
        .all()
    )
    return [e.to_dict() for e in exercises]


@router.get("/challenges", dependencies=[Depends(get_current_identity)])
def list_challenges(db: Session = Depends(get_db)):
    challenges = db.query(Challenge).order_by(Challenge.order_index.asc(), Challenge.id.asc()).all()
    return [c.to_dict() for c in challenges]
