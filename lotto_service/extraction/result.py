# lotto_service/extraction/result.py
"""Tagged result type returned by every field extractor."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T

    def __bool__(self) -> bool:
        return True

    def or_none(self) -> Optional[T]:
        return self.value

    def map(self, fn: Callable[[T], Optional[U]]) -> "ExtractionResult[U]":
        mapped = fn(self.value)
        return ABSENT if mapped is None else Found(mapped)


class _Absent:
    """Singleton marking a field that could not be located on the page."""

    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Absent"

    def or_none(self) -> None:
        return None

    def map(self, fn: Callable[[Any], Any]) -> "_Absent":
        return self


ABSENT = _Absent()

ExtractionResult = Union[Found[T], _Absent]
