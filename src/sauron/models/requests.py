"""Outbound payloads: login and AI query requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sauron.models.base import Record, get_str
from sauron.models.provider import AIProvider


def _decode_provider(data: dict, default: AIProvider) -> AIProvider:
    # Unknown provider strings keep the default instead of failing the decode
    raw = data.get("provider")
    if not isinstance(raw, str):
        return default
    try:
        return AIProvider.parse(raw)
    except ValueError:
        return default


@dataclass
class LoginRequest(Record):
    """Credential exchange for a gateway JWT."""

    api_key: str = ""
    provider: AIProvider = AIProvider.OPENAI

    def validate(self) -> None:
        self._require(self.api_key, "api_key")

    def to_dict(self) -> dict[str, Any]:
        return {"api_key": self.api_key, "provider": self.provider.value}

    @classmethod
    def from_dict(cls, data: Any) -> LoginRequest:
        request = cls()
        if not isinstance(data, dict):
            return request
        request.api_key = get_str(data, "api_key", request.api_key)
        request.provider = _decode_provider(data, request.provider)
        return request


@dataclass
class AIQueryRequest(Record):
    """A prompt for the gateway, optionally with base64-encoded images.

    The same request shape drives plain, streamed and algorithm queries.
    """

    prompt: str = ""
    provider: AIProvider = AIProvider.OPENAI
    model: str = "default"
    images: list[str] = field(default_factory=list)

    def add_image(self, image_b64: str) -> None:
        self.images.append(image_b64)

    def validate(self) -> None:
        self._require(self.prompt, "prompt")

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "prompt": self.prompt,
            "provider": self.provider.value,
        }
        if self.model:
            payload["model"] = self.model
        if self.images:
            payload["images"] = list(self.images)
        return payload

    @classmethod
    def from_dict(cls, data: Any) -> AIQueryRequest:
        request = cls()
        if not isinstance(data, dict):
            return request
        request.prompt = get_str(data, "prompt", request.prompt)
        request.provider = _decode_provider(data, request.provider)
        request.model = get_str(data, "model", request.model)
        images = data.get("images")
        if isinstance(images, list):
            request.images = [image for image in images if isinstance(image, str)]
        return request
