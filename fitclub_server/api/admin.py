# fitclub_server/api/admin.py

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session
from fitclub_server.api.deps import require_admin
from fitclub_server.core import upsert
from fitclub_server.database import get_db
from fitclub_server.models import Exercise, Progress, User, Workout


router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


class ConfigRequest(BaseModel):
    key: str
    value: str


@router.post("/config")
def set_config(req: ConfigRequest, db: Session = Depends(get_db)):
    upsert.set_config(db, req.key, req.value)
    return {"success": True}


@router.get("/stats")
def get_stats(db: Session = Depends(get_db)):
    return {
        "users": db.query(User).count(),
        "workouts": db.query(Workout).count(),
    }


@router.delete("/workouts/{workout_id}")
def delete_workout(workout_id: int, db: Session = Depends(get_db)):
    """
    Deletes a workout together with its exercises.
    Progress rows pointing at it keep their date but lose the reference.
    """
    db.query(Progress).filter(Progress.workout_completed_id == workout_id).update(
        {Progress.workout_completed_id: None}, synchronize_session=False
    )
    db.query(Exercise).filter(Exercise.workout_id == workout_id).delete(synchronize_session=False)
    db.query(Workout).filter(Workout.id == workout_id).delete(synchronize_session=False)
    db.commit()
    return {"success": True}
