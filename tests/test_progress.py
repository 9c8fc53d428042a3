from datetime import date

from fitclub_server.core import upsert
from fitclub_server.models import Progress, Workout

from conftest import bearer


def _rows(db_session):
    db_session.expire_all()
    return db_session.query(Progress).order_by(Progress.date.asc()).all()


def test_water_accumulates_on_same_day(client, user_token, db_session, monkeypatch):
    monkeypatch.setattr(upsert, "today_key", lambda: date(2026, 3, 1))

    for _ in range(2):
        r = client.post("/api/progress/water", json={"amount": 300}, headers=bearer(user_token))
        assert r.status_code == 200
        assert r.json() == {"success": True}

    rows = _rows(db_session)
    assert len(rows) == 1
    assert rows[0].water_intake == 600
    assert rows[0].date == date(2026, 3, 1)


def test_water_on_different_days_creates_rows(client, user_token, db_session, monkeypatch):
    monkeypatch.setattr(upsert, "today_key", lambda: date(2026, 3, 1))
    client.post("/api/progress/water", json={"amount": 300}, headers=bearer(user_token))
    monkeypatch.setattr(upsert, "today_key", lambda: date(2026, 3, 2))
    client.post("/api/progress/water", json={"amount": 300}, headers=bearer(user_token))

    rows = _rows(db_session)
    assert [(r.date, r.water_intake) for r in rows] == [
        (date(2026, 3, 1), 300),
        (date(2026, 3, 2), 300),
    ]

    listed = client.get("/api/progress", headers=bearer(user_token)).json()
    assert [r["date"] for r in listed] == ["2026-03-02", "2026-03-01"]


def test_progress_is_scoped_to_caller(client, user_token, admin_token):
    client.post("/api/progress/water", json={"amount": 250}, headers=bearer(user_token))

    assert len(client.get("/api/progress", headers=bearer(user_token)).json()) == 1
    assert client.get("/api/progress", headers=bearer(admin_token)).json() == []


def test_weight_and_workout_share_the_daily_row(client, user_token, db_session, monkeypatch):
    monkeypatch.setattr(upsert, "today_key", lambda: date(2026, 3, 5))
    workout_id = db_session.query(Workout).first().id

    client.post("/api/progress/water", json={"amount": 300}, headers=bearer(user_token))
    assert client.post("/api/progress/weight", json={"weight": 72.5}, headers=bearer(user_token)).status_code == 200
    assert client.post(
        "/api/progress/workout", json={"workout_id": workout_id}, headers=bearer(user_token)
    ).status_code == 200
    client.post("/api/progress/water", json={"amount": 200}, headers=bearer(user_token))

    rows = _rows(db_session)
    assert len(rows) == 1
    assert rows[0].water_intake == 500
    assert rows[0].weight == 72.5
    assert rows[0].workout_completed_id == workout_id


def test_weight_without_water_starts_at_zero(client, user_token, db_session):
    client.post("/api/progress/weight", json={"weight": 80}, headers=bearer(user_token))
    rows = _rows(db_session)
    assert rows[0].water_intake == 0


def test_invalid_amount_is_rejected(client, user_token):
    for body in ({"amount": 0}, {"amount": -300}, {}, {"amount": "lots"}):
        r = client.post("/api/progress/water", json=body, headers=bearer(user_token))
        assert r.status_code == 422
        assert r.json()["error"]


def test_upsert_helpers_key_by_user_and_day(db_session):
    upsert.add_water(db_session, 1, 100, day=date(2026, 1, 1))
    upsert.add_water(db_session, 1, 150, day=date(2026, 1, 1))
    upsert.add_water(db_session, 2, 100, day=date(2026, 1, 1))

    rows = _rows(db_session)
    assert sorted((r.user_id, r.water_intake) for r in rows) == [(1, 250), (2, 100)]


def _raw_post(client, path, body, token):
    return client.post(path, content=body, headers={"Content-Type": "application/json", **bearer(token)})


def test_non_finite_weight_is_rejected(client, user_token, db_session):
    for body in ('{"weight": Infinity}', '{"weight": -Infinity}', '{"weight": NaN}'):
        r = _raw_post(client, "/api/progress/weight", body, user_token)
        assert r.status_code == 422
        assert r.json()["fields"] == ["weight"]

    assert _rows(db_session) == []
    assert client.get("/api/progress", headers=bearer(user_token)).status_code == 200


def test_water_amount_has_upper_bound(client, user_token, db_session):
    for amount in (10_001, 10**20):
        r = client.post("/api/progress/water", json={"amount": amount}, headers=bearer(user_token))
        assert r.status_code == 422
        assert r.json()["error"]

    assert client.post("/api/progress/water", json={"amount": 10_000}, headers=bearer(user_token)).status_code == 200
    assert _rows(db_session)[0].water_intake == 10_000


def test_unknown_workout_is_not_recorded(client, user_token, db_session):
    r = client.post("/api/progress/workout", json={"workout_id": 999999}, headers=bearer(user_token))
    assert r.status_code == 404
    assert r.json() == {"error": "Workout not found"}

    r = client.post("/api/progress/workout", json={"workout_id": 10**20}, headers=bearer(user_token))
    assert r.status_code == 422

    assert _rows(db_session) == []
