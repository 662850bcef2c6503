"""Wire-level request and response snapshots exchanged with the transport."""

from dataclasses import dataclass, field

from httpx import Headers

HeaderList = tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class WireRequest:
    """A fully built HTTP request, ready to be handed to a transport.

    Headers are kept as an ordered tuple of pairs so that repeated names
    survive; the instance is immutable and may cross threads freely.
    """

    url: str
    method: str
    headers: HeaderList = ()
    content: bytes | None = None

    def header_values(self, name: str) -> list[str]:
        """Return every value sent for ``name``, compared case-insensitively."""
        lowered = name.lower()
        return [value for key, value in self.headers if key.lower() == lowered]

    def httpx_headers(self) -> Headers:
        return Headers(list(self.headers))


@dataclass(frozen=True)
class TransportResponse:
    """Raw result of a single transport operation.

    Exactly one of ``error`` or ``status_code`` is normally set: ``error``
    means the exchange itself failed and no HTTP status was received.
    """

    data: bytes | None = None
    status_code: int | None = None
    error: BaseException | None = None
    headers: HeaderList = field(default=())
