# fitclub_server/core/upsert.py

from datetime import date, datetime, timezone
from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session
from fitclub_server.models import AppConfig, Progress


def today_key() -> date:
    """Calendar day (UTC) used as the progress row key."""
    return datetime.now(timezone.utc).date()


def insert_for(db: Session, table):
    """
    Returns a dialect-specific INSERT supporting ON CONFLICT clauses.
    Both SQLite (3.24+) and Postgres accept the same upsert shape.
    """
    name = db.get_bind().dialect.name
    if name == "postgresql":
        return postgresql.insert(table)
    if name == "sqlite":
        return sqlite.insert(table)
    raise NotImplementedError(f"Upsert is not supported for dialect '{name}'")


# -------------------------------
# Progress
# -------------------------------

def add_water(db: Session, user_id: int, amount: int, day: date | None = None):
    day = day or today_key()
    stmt = insert_for(db, Progress).values(user_id=user_id, date=day, water_intake=amount)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Progress.user_id, Progress.date],
        set_={"water_intake": func.coalesce(Progress.water_intake, 0) + stmt.excluded.water_intake},
    )
    db.execute(stmt)
    db.commit()


def record_weight(db: Session, user_id: int, weight: float, day: date | None = None):
    day = day or today_key()
    stmt = insert_for(db, Progress).values(user_id=user_id, date=day, weight=weight, water_intake=0)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Progress.user_id, Progress.date],
        set_={"weight": stmt.excluded.weight},
    )
    db.execute(stmt)
    db.commit()


def record_workout(db: Session, user_id: int, workout_id: int, day: date | None = None):
    day = day or today_key()
    stmt = insert_for(db, Progress).values(
        user_id=user_id, date=day, workout_completed_id=workout_id, water_intake=0
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Progress.user_id, Progress.date],
        set_={"workout_completed_id": stmt.excluded.workout_completed_id},
    )
    db.execute(stmt)
    db.commit()


# -------------------------------
# App config
# -------------------------------

def set_config(db: Session, key: str, value: str):
    stmt = insert_for(db, AppConfig).values(key=key, value=value)
    stmt = stmt.on_conflict_do_update(
        index_elements=[AppConfig.key],
        set_={"value": stmt.excluded.value},
    )
    db.execute(stmt)
    db.commit()
