import json

import pytest

from fitclub_app.services import api
from fitclub_app.services.session import TOKEN_KEY, USER_KEY, SessionStore


class FakeCookies(dict):
    """Mapping with the save() hook of a cookie manager."""

    def __init__(self):
        super().__init__()
        self.saves = 0

    def save(self):
        self.saves += 1


USER = {"id": 3, "email": "a@x.com", "name": "A", "role": "user", "language": "pt"}


def test_saved_session_is_restored():
    cookies = FakeCookies()
    SessionStore(cookies).save("tok", USER)

    assert cookies.saves == 1
    assert SessionStore(cookies).restore() == ("tok", USER)


def test_restore_without_session():
    assert SessionStore(FakeCookies()).restore() is None
    assert SessionStore({TOKEN_KEY: "tok"}).restore() is None


def test_restore_with_corrupt_profile():
    assert SessionStore({TOKEN_KEY: "tok", USER_KEY: "{not json"}).restore() is None
    assert SessionStore({TOKEN_KEY: "tok", USER_KEY: json.dumps(["list"])}).restore() is None


def test_update_user_keeps_token():
    cookies = FakeCookies()
    store = SessionStore(cookies)
    store.save("tok", USER)
    store.update_user({**USER, "language": "en"})

    token, user = store.restore()
    assert token == "tok"
    assert user["language"] == "en"


def test_clear_removes_session():
    cookies = FakeCookies()
    store = SessionStore(cookies)
    store.save("tok", USER)
    store.clear()

    assert store.restore() is None
    assert TOKEN_KEY not in cookies and USER_KEY not in cookies
    store.clear()


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


@pytest.fixture()
def fake_request(monkeypatch):
    calls = []
    responses = []

    def _request(method, url, headers=None, timeout=None, **kwargs):
        calls.append({"method": method, "url": url, "headers": headers, **kwargs})
        return responses.pop(0)

    monkeypatch.setattr(api.requests, "request", _request)
    return calls, responses


def test_login_success(fake_request):
    calls, responses = fake_request
    responses.append(FakeResponse(200, {"token": "tok", "user": USER}))

    assert api.login_user("a@x.com", "pw") == {"token": "tok", "user": USER}
    assert calls[0]["method"] == "POST"
    assert calls[0]["url"].endswith("/api/auth/login")
    assert calls[0]["json"] == {"email": "a@x.com", "password": "pw"}


def test_login_error_message_is_surfaced(fake_request):
    _, responses = fake_request
    responses.append(FakeResponse(401, {"error": "Wrong password."}))

    assert api.login_user("a@x.com", "bad") == {"error": "Wrong password.", "status": 401}


def test_error_without_json_body(fake_request):
    _, responses = fake_request
    responses.append(FakeResponse(502, None))

    result = api.get_config()
    assert result["status"] == 502
    assert "Could not load configuration" in result["error"]


def test_bearer_header_is_sent(fake_request):
    calls, responses = fake_request
    responses.append(FakeResponse(200, {"success": True}))

    api.add_water("tok", 300)
    assert calls[0]["headers"] == {"Authorization": "Bearer tok"}
    assert calls[0]["json"] == {"amount": 300}


def test_connection_error(monkeypatch):
    def _fail(*args, **kwargs):
        raise api.requests.ConnectionError("refused")

    monkeypatch.setattr(api.requests, "request", _fail)
    assert api.list_workouts("tok")["error"].startswith("Connection error")
