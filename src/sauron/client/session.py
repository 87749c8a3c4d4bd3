"""
Session — the single authorization credential a client holds.

``present`` records whether a token was ever installed (login, refresh or
set_token) since the last clear. An empty token may be stored, but the
client treats a session as authenticated only when the token is non-empty.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Session:
    token: str = ""
    present: bool = False

    @property
    def authenticated(self) -> bool:
        return self.present and bool(self.token)

    def set(self, token: str) -> None:
        self.token = token
        self.present = True

    def clear(self) -> None:
        self.token = ""
        self.present = False
