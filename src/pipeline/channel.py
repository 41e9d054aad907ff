"""
Unbuffered hand-off channel connecting a paginator to its consumer.
"""
import queue
import threading
from typing import Generic, Iterator, TypeVar

from src.exceptions import ChannelClosedError

T = TypeVar("T")

_CLOSED = object()


class HandoffChannel(Generic[T]):
    """
    Single-producer, single-consumer rendezvous channel.

    `send()` returns only after the receiver has taken the item, so a fast
    producer is held back to the pace of its consumer. Iterating the channel
    yields items in send order and stops once the channel is closed.
    """

    def __init__(self, name: str = "channel"):
        self.name = name
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=1)
        self._lock = threading.Lock()
        self._closed = False
        self._drained = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, item: T) -> None:
        """
        Hand an item to the receiver, blocking until it has been taken.

        Raises:
            ChannelClosedError: If the channel was already closed
        """
        with self._lock:
            if self._closed:
                raise ChannelClosedError(f"send on closed channel '{self.name}'")
        self._queue.put(item)
        self._queue.join()

    def close(self) -> None:
        """
        Close the channel. Only the producer may close, and only once.

        Raises:
            ChannelClosedError: If the channel was already closed
        """
        with self._lock:
            if self._closed:
                raise ChannelClosedError(f"channel '{self.name}' closed twice")
            self._closed = True
        self._queue.put(_CLOSED)

    def receive(self) -> T:
        """
        Take the next item, blocking until one is available.

        Raises:
            StopIteration: If the channel is closed and drained
        """
        if self._drained:
            raise StopIteration
        item = self._queue.get()
        self._queue.task_done()
        if item is _CLOSED:
            self._drained = True
            raise StopIteration
        return item  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.receive()
            except StopIteration:
                return
