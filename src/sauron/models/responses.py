"""Inbound payloads: tokens, answers, health and error bodies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sauron.models.base import Record, get_obj, get_str


@dataclass
class TokenResponse(Record):
    token: str = ""

    def validate(self) -> None:
        self._require(self.token, "token")

    def to_dict(self) -> dict[str, Any]:
        return {"token": self.token}

    @classmethod
    def from_dict(cls, data: Any) -> TokenResponse:
        if not isinstance(data, dict):
            return cls()
        return cls(token=get_str(data, "token", ""))


@dataclass
class AIQueryResponse(Record):
    response: str = ""

    def validate(self) -> None:
        self._require(self.response, "response")

    def to_dict(self) -> dict[str, Any]:
        return {"response": self.response}

    @classmethod
    def from_dict(cls, data: Any) -> AIQueryResponse:
        if not isinstance(data, dict):
            return cls()
        return cls(response=get_str(data, "response", ""))


@dataclass
class ComplexityInfo(Record):
    """One complexity bound, e.g. value="O(n log n)" plus a short reason."""

    value: str = ""
    explanation: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "explanation": self.explanation}

    @classmethod
    def from_dict(cls, data: Any) -> ComplexityInfo:
        if not isinstance(data, dict):
            return cls()
        return cls(
            value=get_str(data, "value", ""),
            explanation=get_str(data, "explanation", ""),
        )


@dataclass
class AlgorithmComplexity(Record):
    time: ComplexityInfo = field(default_factory=ComplexityInfo)
    space: ComplexityInfo = field(default_factory=ComplexityInfo)

    def to_dict(self) -> dict[str, Any]:
        return {"time": self.time.to_dict(), "space": self.space.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> AlgorithmComplexity:
        if not isinstance(data, dict):
            return cls()
        return cls(
            time=ComplexityInfo.from_dict(get_obj(data, "time")),
            space=ComplexityInfo.from_dict(get_obj(data, "space")),
        )


@dataclass
class AIAlgorithmResponse(Record):
    """Answer to an algorithm query: code, explanation and complexity."""

    explanation: str = ""
    response: str = ""
    complexity: AlgorithmComplexity = field(default_factory=AlgorithmComplexity)

    def validate(self) -> None:
        self._require(self.explanation, "explanation")
        self._require(self.response, "response")

    def to_dict(self) -> dict[str, Any]:
        return {
            "explanation": self.explanation,
            "response": self.response,
            "complexity": self.complexity.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> AIAlgorithmResponse:
        if not isinstance(data, dict):
            return cls()
        return cls(
            explanation=get_str(data, "explanation", ""),
            response=get_str(data, "response", ""),
            complexity=AlgorithmComplexity.from_dict(get_obj(data, "complexity")),
        )


HEALTH_OK = "ok"


@dataclass
class HealthResponse(Record):
    status: str = HEALTH_OK

    def is_ok(self) -> bool:
        return self.status == HEALTH_OK

    def validate(self) -> None:
        self._require(self.status, "status")
        self._require_one_of(self.status, (HEALTH_OK,), "status")

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status}

    @classmethod
    def from_dict(cls, data: Any) -> HealthResponse:
        if not isinstance(data, dict):
            return cls()
        return cls(status=get_str(data, "status", HEALTH_OK))


@dataclass
class ErrorRecord(Record):
    """Body of any non-success response: {"error": "..."}."""

    error: str = ""

    def validate(self) -> None:
        self._require(self.error, "error")

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error}

    @classmethod
    def from_dict(cls, data: Any) -> ErrorRecord:
        if not isinstance(data, dict):
            return cls()
        return cls(error=get_str(data, "error", ""))
