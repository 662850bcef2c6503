import asyncio
from contextlib import aclosing
from logging import getLogger
from typing import AsyncGenerator, AsyncIterator, Callable, Generic, Optional, TypeVar

from .._utils.constants import LOGGER_NAME
from ..models.errors import ApiKitError

D = TypeVar("D")

logger = getLogger(LOGGER_NAME)


class Subscription:
    """Handle to a running ``ResponseStream`` subscription."""

    def __init__(self, task: "asyncio.Task[None]") -> None:
        self._task = task

    def cancel(self) -> None:
        """Stop the subscription and cancel the in-flight request.

        No further callbacks are invoked once the cancellation lands.
        """
        self._task.cancel()

    @property
    def cancelled(self) -> bool:
        return self._task.cancelled()

    def done(self) -> bool:
        return self._task.done()

    async def wait(self) -> None:
        await asyncio.wait({self._task})


class ResponseStream(Generic[D]):
    """Cold stream emitting a single decoded value.

    Nothing is built or sent until the stream is iterated or subscribed to,
    and each iteration performs its own request. Iterating yields exactly one
    value or raises an ``ApiKitError``.
    """

    def __init__(self, source: Callable[[], AsyncGenerator[D, None]]) -> None:
        self._source = source

    def __aiter__(self) -> AsyncIterator[D]:
        return self._source()

    async def first(self) -> D:
        async with aclosing(self._source()) as values:
            async for value in values:
                return value
        raise RuntimeError("Stream completed without a value")

    def subscribe(
        self,
        on_next: Callable[[D], None],
        on_error: Callable[[ApiKitError], None],
        on_completed: Optional[Callable[[], None]] = None,
    ) -> Subscription:
        """Start the request on the running event loop.

        Exactly one of ``on_error`` or ``on_next`` followed by
        ``on_completed`` is called, unless the subscription is cancelled
        first.

        Raises:
            RuntimeError: No event loop is running in the current thread.
        """
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._deliver(on_next, on_error, on_completed))
        return Subscription(task)

    async def _deliver(
        self,
        on_next: Callable[[D], None],
        on_error: Callable[[ApiKitError], None],
        on_completed: Optional[Callable[[], None]],
    ) -> None:
        try:
            value = await self.first()
        except ApiKitError as e:
            logger.debug(f"Stream terminated with {e.kind.value} error")
            on_error(e)
            return

        on_next(value)
        if on_completed is not None:
            on_completed()
