"""Result type for operations that can fail."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeAlias, TypeVar, Generic

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

Result: TypeAlias = Ok[T] | Err[E]


def collect(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[tuple[U, ...], E]:
    """Apply f to each item left to right; stop at the first Err."""
    out: list[U] = []
    for item in items:
        match f(item):
            case Ok(value):
                out.append(value)
            case Err() as err:
                return err
    return Ok(tuple(out))
