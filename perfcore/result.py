"""Result wrapper for lookups that can be rejected as out of range."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import OutOfRangeError

T = TypeVar("T")


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Either a value or the OutOfRangeError that prevented it."""
    value: Optional[T] = None
    error: Optional[OutOfRangeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or re-raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: Any) -> Any:
        return self.value if self.ok else default

    def display(self, fmt: str = "{}", missing: str = "N/A") -> str:
        """Format the value for presentation, or the missing marker."""
        if not self.ok:
            return missing
        return fmt.format(self.value)


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> LookupResult[T]:
    """Call func and capture an OutOfRangeError as a failed result.

    Any other exception propagates.
    """
    try:
        return LookupResult(value=func(*args, **kwargs))
    except OutOfRangeError as exc:
        return LookupResult(error=exc)
