"""Sauron client — session state and the request pipeline."""

from sauron.client.client import SauronClient
from sauron.client.session import Session

__all__ = ["SauronClient", "Session"]
