"""Result types for the AI text service.

Service failures are returned as values, never raised, so callers pick
their own fallback and the calculators stay untouched by network errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class AiErrorKind(str, Enum):
    NOT_CONFIGURED = "not_configured"
    REQUEST_FAILED = "request_failed"
    INVALID_RESPONSE = "invalid_response"


@dataclass(frozen=True)
class AiError:
    kind: AiErrorKind
    message: str


@dataclass(frozen=True)
class AiResult(Generic[T]):
    """Either a value or an AiError."""

    value: T | None = None
    error: AiError | None = None

    @classmethod
    def success(cls, value: T) -> AiResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, kind: AiErrorKind, message: str) -> AiResult[T]:
        return cls(error=AiError(kind=kind, message=message))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: T) -> T:
        if self.error is not None or self.value is None:
            return default
        return self.value


@dataclass(frozen=True)
class DocumentAnalysis:
    """Fields extracted from a receipt, invoice or tax certificate."""

    date: str | None = None
    amount: str | None = None
    vendor: str | None = None
    type: str | None = None
    summary: str | None = None

    @property
    def has_amount(self) -> bool:
        """False when no amount was found or it reads as zero."""
        if not self.amount:
            return False
        try:
            return Decimal(self.amount.replace(",", "")) != 0
        except InvalidOperation:
            return True

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> DocumentAnalysis:
        def text(key: str) -> str | None:
            value = payload.get(key)
            if value is None:
                return None
            value = str(value).strip()
            return value or None

        return cls(
            date=text("date"),
            amount=text("amount"),
            vendor=text("vendor"),
            type=text("type"),
            summary=text("summary"),
        )
