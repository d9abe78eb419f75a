"""
Result - success/failure union used between layers

A Result holds either a value (success) or an AppError (failure).
"""
from typing import Any, Callable, Generic, Optional, TypeVar

from catalog.shared.app_error import AppError

T = TypeVar('T')
U = TypeVar('U')


class Result(Generic[T]):
    """Immutable success/failure container"""

    __slots__ = ('_is_success', '_value', '_error')

    def __init__(self, is_success: bool, value: Optional[T] = None, error: Optional[Exception] = None):
        object.__setattr__(self, '_is_success', is_success)
        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_error', error)

    def __setattr__(self, name, value):
        raise AttributeError("Result is immutable")

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(True, value, None)

    @classmethod
    def failure(cls, error: Exception) -> "Result[T]":
        return cls(False, None, error)

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def value(self) -> Optional[T]:
        return self._value

    @property
    def error(self) -> Optional[Exception]:
        return self._error

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Transform the value of a success; exceptions become failures"""
        if self.is_failure:
            return self
        try:
            return Result.success(fn(self._value))
        except Exception as e:
            return Result.failure(e)

    def map_error(self, fn: Callable[[Exception], Exception]) -> "Result[T]":
        if self.is_success:
            return self
        try:
            return Result.failure(fn(self._error))
        except Exception as e:
            return Result.failure(e)

    def flat_map(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        if self.is_failure:
            return self
        try:
            return fn(self._value)
        except Exception as e:
            return Result.failure(e)

    def get_or_else(self, default: T) -> T:
        return self._value if self.is_success else default

    def unwrap(self) -> T:
        """Return the value or raise the stored error"""
        if self.is_success:
            return self._value
        raise self._error

    def to_dict(self) -> dict:
        error = self._error
        if isinstance(error, AppError):
            error = error.to_dict()
        elif error is not None:
            error = str(error)

        return {
            'is_success': self.is_success,
            'is_failure': self.is_failure,
            'value': self._value,
            'error': error
        }

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.Success({self._value!r})"
        return f"Result.Failure({self._error})"


def ok(value: Any = None) -> Result:
    return Result.success(value)


def fail(error: Exception) -> Result:
    return Result.failure(error)
