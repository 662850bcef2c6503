from functools import lru_cache
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter

D = TypeVar("D")

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


@lru_cache(maxsize=256)
def _adapter_for(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


class Codec(Protocol):
    """Converts between response bytes and typed values.

    ``decode`` must raise ``ValueError`` (or a subclass) when the bytes do not
    represent a ``type_``; partially decoded values are never returned.
    """

    def decode(self, data: bytes, type_: type[D]) -> D: ...

    def encode(self, value: Any) -> bytes: ...


class JsonCodec:
    """JSON codec backed by pydantic type adapters.

    Any type pydantic can validate works as a target: models, dataclasses,
    ``TypedDict``, builtin containers such as ``list[int]``.
    """

    def __init__(self, *, by_alias: bool = True, exclude_none: bool = False):
        self._by_alias = by_alias
        self._exclude_none = exclude_none

    def decode(self, data: bytes, type_: type[D]) -> D:
        return _adapter_for(type_).validate_json(data)

    def encode(self, value: Any) -> bytes:
        return _ANY_ADAPTER.dump_json(
            value, by_alias=self._by_alias, exclude_none=self._exclude_none
        )


default_codec = JsonCodec()
