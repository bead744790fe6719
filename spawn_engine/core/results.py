"""
Explicit outcomes for the engine's I/O boundaries.

Friend lookups, the density scan and the reservation write are allowed to
fail without failing the request. Instead of raising, they return a
``LookupResult`` holding the best value available plus the error that
degraded it, so the caller decides what "degraded" means at its own seam.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Value returned from a fallible I/O step."""

    value: T
    error: Optional[str] = None
    partial: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def degraded(self) -> bool:
        """True when the value is a fallback or a partial subset."""
        return self.error is not None or self.partial

    @classmethod
    def success(cls, value: T) -> "LookupResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, fallback: T, error: Exception) -> "LookupResult[T]":
        return cls(value=fallback, error=str(error) or type(error).__name__)
