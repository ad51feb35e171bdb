"""Result type used by use cases

Use cases never raise for business failures; they return either
``Return.ok(value)`` or ``Return.err(Error(...))``.
"""

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class Error(BaseModel):
    """Business error with a stable machine-readable code"""

    code: str
    message: str
    reason: Optional[str] = None


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def __repr__(self) -> str:
        if self.is_err():
            return f"Result(error={self.error.code})"
        return f"Result(value={self.value!r})"


class Return:
    @staticmethod
    def ok(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
