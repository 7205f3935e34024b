from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")

SOURCE_MOCK = "mock"
SOURCE_MOCK_FALLBACK = "mock-fallback"
SOURCE_MOCK_ERROR_FALLBACK = "mock-error-fallback"


@dataclass(slots=True)
class RealResult(Generic[T]):
    value: T
    source: str

    @property
    def is_mock(self) -> bool:
        return False


@dataclass(slots=True)
class MockResult(Generic[T]):
    """Simulated output. `reason` says why the real service was not used."""

    value: T
    reason: str

    @property
    def source(self) -> str:
        return self.reason

    @property
    def is_mock(self) -> bool:
        return True


ServiceResult = Union[RealResult[T], MockResult[T]]
