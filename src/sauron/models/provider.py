"""AI providers the gateway can route a query to."""

from __future__ import annotations

from enum import Enum


class AIProvider(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    MISTRAL = "mistral"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, text: str) -> AIProvider:
        """Convert a wire string to a provider.

        Raises ValueError for anything outside the closed set; matching is
        exact (lower-case), as on the wire.
        """
        for provider in cls:
            if provider.value == text:
                return provider
        raise ValueError(f"Invalid provider string: {text}")

    @classmethod
    def values(cls) -> list[str]:
        return [provider.value for provider in cls]

    def __str__(self) -> str:
        return self.value
