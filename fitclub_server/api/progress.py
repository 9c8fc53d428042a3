# fitclub_server/api/progress.py

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session
from fitclub_server.api.deps import get_current_identity
from fitclub_server.core import upsert
from fitclub_server.core.security import Identity
from fitclub_server.database import get_db
from fitclub_server.models import Progress, Workout


router = APIRouter(prefix="/api/progress", tags=["progress"])

# Upper bound for a single water entry, in millilitres.
MAX_WATER_ML = 10_000
MAX_ID = 2**31 - 1


class WaterRequest(BaseModel):
    amount: int = Field(gt=0, le=MAX_WATER_ML)


class WeightRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    weight: float = Field(gt=0)


class WorkoutDoneRequest(BaseModel):
    workout_id: int = Field(gt=0, le=MAX_ID)


@router.get("")
def list_progress(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    rows = (
        db.query(Progress)
        .filter(Progress.user_id == identity.id)
        .order_by(Progress.date.desc())
        .all()
    )
    return [r.to_dict() for r in rows]


@router.post("/water")
def add_water(
    req: WaterRequest,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    upsert.add_water(db, identity.id, req.amount)
    return {"success": True}


@router.post("/weight")
def record_weight(
    req: WeightRequest,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    upsert.record_weight(db, identity.id, req.weight)
    return {"success": True}


@router.post("/workout")
def record_workout(
    req: WorkoutDoneRequest,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    if db.get(Workout, req.workout_id) is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    upsert.record_workout(db, identity.id, req.workout_id)
    return {"success": True}
