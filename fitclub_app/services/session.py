# fitclub_app/services/session.py

import json


TOKEN_KEY = "token"
USER_KEY = "user"


class SessionStore:
    """
    Keeps the issued token and last-known profile in browser-local storage.

    `storage` is any mutable mapping of strings; in the app it is an
    EncryptedCookieManager. The token is never checked against the server
    on restore, so a revoked token only surfaces on the first protected call.
    """

    def __init__(self, storage):
        self.storage = storage

    def _flush(self):
        save = getattr(self.storage, "save", None)
        if callable(save):
            save()

    def save(self, token: str, user: dict):
        self.storage[TOKEN_KEY] = token
        self.storage[USER_KEY] = json.dumps(user)
        self._flush()

    def update_user(self, user: dict):
        self.storage[USER_KEY] = json.dumps(user)
        self._flush()

    def restore(self):
        """
        Returns (token, user) from storage, or None when no usable session exists.
        """
        token = self.storage.get(TOKEN_KEY)
        raw_user = self.storage.get(USER_KEY)
        if not token or not raw_user:
            return None
        try:
            user = json.loads(raw_user)
        except (TypeError, ValueError):
            return None
        if not isinstance(user, dict):
            return None
        return token, user

    def clear(self):
        for key in (TOKEN_KEY, USER_KEY):
            if key in self.storage:
                del self.storage[key]
        self._flush()
