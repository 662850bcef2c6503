"""Result values delivered by the callback shape."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .errors import ApiKitError, ErrorKind

D = TypeVar("D")


@dataclass(frozen=True)
class Success(Generic[D]):
    value: D

    @property
    def is_success(self) -> bool:
        return True

    @property
    def kind(self) -> None:
        return None

    def unwrap(self) -> D:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: ApiKitError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    def unwrap(self):
        raise self.error


Outcome = Union[Success[D], Failure]
