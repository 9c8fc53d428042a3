# fitclub_app/services/api.py

import os
import requests

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("FITCLUB_API_URL", "http://localhost:8000")


def _auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def _result(res, fallback):
    """
    Decodes a JSON response. Non-2xx responses become {"error": ...}.
    """
    try:
        data = res.json()
    except ValueError:
        data = None

    if 200 <= res.status_code < 300:
        return data
    if isinstance(data, dict) and data.get("error"):
        return {"error": data["error"], "status": res.status_code}
    return {"error": f"{fallback} ({res.status_code})", "status": res.status_code}


def _request(method, path, fallback, token=None, **kwargs):
    headers = _auth_headers(token) if token else {}
    try:
        res = requests.request(method, f"{FASTAPI_URL}{path}", headers=headers, timeout=10, **kwargs)
    except requests.RequestException as e:
        return {"error": f"Connection error: {e}"}
    return _result(res, fallback)


# -------------------------------
# Authentication
# -------------------------------

def login_user(email, password):
    """
    Logs in and returns {"token", "user"} or {"error"}.
    """
    return _request("POST", "/api/auth/login", "Login failed", json={"email": email, "password": password})


def register_user(email, password, name):
    return _request(
        "POST", "/api/auth/register", "Registration failed",
        json={"email": email, "password": password, "name": name},
    )


# -------------------------------
# Content
# -------------------------------

def get_config():
    return _request("GET", "/api/config", "Could not load configuration")


def list_workouts(token):
    return _request("GET", "/api/workouts", "Could not load workouts", token=token)


def list_exercises(token, workout_id):
    return _request("GET", f"/api/workouts/{workout_id}/exercises", "Could not load exercises", token=token)


def list_challenges(token):
    return _request("GET", "/api/challenges", "Could not load challenges", token=token)


# -------------------------------
# Progress
# -------------------------------

def list_progress(token):
    return _request("GET", "/api/progress", "Could not load progress", token=token)


def add_water(token, amount=300):
    return _request("POST", "/api/progress/water", "Could not save water intake", token=token, json={"amount": amount})


def record_weight(token, weight):
    return _request("POST", "/api/progress/weight", "Could not save weight", token=token, json={"weight": weight})


def record_workout(token, workout_id):
    return _request(
        "POST", "/api/progress/workout", "Could not save workout", token=token, json={"workout_id": workout_id}
    )


# -------------------------------
# Profile
# -------------------------------

def update_profile(token, **fields):
    return _request("PUT", "/api/users/me", "Could not update profile", token=token, json=fields)


# -------------------------------
# Admin
# -------------------------------

def get_stats(token):
    return _request("GET", "/api/admin/stats", "Could not load stats", token=token)


def set_config(token, key, value):
    return _request("POST", "/api/admin/config", "Could not save configuration", token=token, json={"key": key, "value": value})


def delete_workout(token, workout_id):
    return _request("DELETE", f"/api/admin/workouts/{workout_id}", "Could not delete workout", token=token)
