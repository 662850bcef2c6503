"""Request bodies.

The builder only relies on the ``Body`` protocol. It never calls ``encode()``
on a body whose ``is_empty`` is true.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Sequence
from urllib.parse import urlencode

from ..models.errors import EncodingError
from ._codec import Codec, default_codec
from .constants import (
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_OCTET_STREAM,
    HEADER_CONTENT_TYPE,
)

HeaderPairs = tuple[tuple[str, str], ...]


class Body(Protocol):
    """Payload attached to a request.

    ``EmptyBody``, ``JsonBody``, ``RawBody`` and ``FormBody`` cover the common
    cases; callers may supply their own implementation.
    """

    @property
    def is_empty(self) -> bool: ...

    @property
    def additional_headers(self) -> HeaderPairs: ...

    def encode(self) -> bytes: ...


@dataclass(frozen=True)
class EmptyBody:
    @property
    def is_empty(self) -> bool:
        return True

    @property
    def additional_headers(self) -> HeaderPairs:
        return ()

    def encode(self) -> bytes:
        raise EncodingError("An empty body has no encoding")


@dataclass(frozen=True)
class JsonBody:
    value: Any
    extra_headers: HeaderPairs = ()
    codec: Codec | None = None

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def additional_headers(self) -> HeaderPairs:
        return ((HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON), *self.extra_headers)

    def encode(self) -> bytes:
        codec = self.codec or default_codec
        try:
            return codec.encode(self.value)
        except (ValueError, TypeError) as e:
            raise EncodingError(str(e)) from e


@dataclass(frozen=True)
class RawBody:
    content: bytes | str
    content_type: str = CONTENT_TYPE_OCTET_STREAM
    extra_headers: HeaderPairs = ()

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def additional_headers(self) -> HeaderPairs:
        return ((HEADER_CONTENT_TYPE, self.content_type), *self.extra_headers)

    def encode(self) -> bytes:
        if isinstance(self.content, bytes):
            return self.content
        try:
            return self.content.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodingError(str(e)) from e


@dataclass(frozen=True)
class FormBody:
    """``application/x-www-form-urlencoded`` fields, order preserved."""

    fields: Mapping[str, Any] | Sequence[tuple[str, Any]]
    extra_headers: HeaderPairs = ()

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def additional_headers(self) -> HeaderPairs:
        return ((HEADER_CONTENT_TYPE, CONTENT_TYPE_FORM), *self.extra_headers)

    def encode(self) -> bytes:
        try:
            return urlencode(self.fields, doseq=True).encode("ascii")
        except (TypeError, UnicodeEncodeError) as e:
            raise EncodingError(str(e)) from e

