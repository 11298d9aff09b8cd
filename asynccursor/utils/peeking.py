"""
PeekingIterator.

One-element look-ahead over a forward-only sequence of rows.
"""
from collections.abc import AsyncIterator, Iterator
from typing import Any, Union


_EMPTY = object()


class PeekingIterator:
    """
    PeekingIterator.
        Wraps an async (or plain) iterable and keeps at most one row
        buffered, so the next row can be inspected without consuming it.
    ----
      params:
          source: async iterable or iterable of rows.
    """
    __slots__ = ('_source', '_is_async', '_cached', '_exhausted')

    def __init__(self, source: Any):
        if hasattr(source, '__aiter__'):
            self._source: Union[AsyncIterator, Iterator] = source.__aiter__()
            self._is_async = True
        else:
            self._source = iter(source)
            self._is_async = False
        self._cached = _EMPTY
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    async def _fetch(self) -> None:
        if self._cached is not _EMPTY or self._exhausted:
            return
        try:
            if self._is_async:
                self._cached = await self._source.__anext__()
            else:
                self._cached = next(self._source)
        except (StopAsyncIteration, StopIteration):
            # underlying source ran out
            await self.discard()

    async def has_next(self) -> bool:
        await self._fetch()
        return self._cached is not _EMPTY

    async def peek(self) -> Any:
        """Returns the next row without consuming it.

        raise: StopAsyncIteration when no row remains.
        """
        if not await self.has_next():
            raise StopAsyncIteration("End of sequence")
        return self._cached

    async def next(self) -> Any:
        """Consumes and returns the next row.

        raise: StopAsyncIteration when no row remains.
        """
        row = await self.peek()
        self._cached = _EMPTY
        return row

    async def discard(self) -> None:
        """Abandon any remaining rows and release the source.

        Closes the source instead of draining it; calling it again is a no-op.
        """
        self._cached = _EMPTY
        if self._exhausted:
            return
        self._exhausted = True
        source, self._source = self._source, None
        if self._is_async:
            aclose = getattr(source, 'aclose', None)
            if aclose is not None:
                await aclose()
        else:
            close = getattr(source, 'close', None)
            if close is not None:
                close()

    ### Async iterator protocol
    def __aiter__(self) -> "PeekingIterator":
        return self

    async def __anext__(self) -> Any:
        return await self.next()
