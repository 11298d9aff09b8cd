"""
ResultCursor.

Stateful, single-pass reader over the records of a query result.
"""
from typing import Any, Optional, Union
from collections.abc import Callable, Sequence
import logging
from .exceptions import ClientError, NoSuchRecord
from .meta.record import Record
from .utils.peeking import PeekingIterator


def record_as_is(cursor: "ResultCursor") -> Record:
    """Default mapping for list(): the record under the cursor."""
    return cursor.record()


class ResultCursor:
    """
    ResultCursor.

    Walks the records of a result one at a time or in bulk.
    ----
      params:
          keys: field names shared by every record.
          records: async iterable (or iterable) of Record, in result order.
          summary: summary object, final once the records are drained.

    The cursor starts before the first record (position -1); every
    successful next() moves it one record forward. Once a limit is
    reached, or the records are bulk-read, summarized or the cursor is
    closed, the remaining records are discarded and never reachable again.
    """

    def __init__(self, keys: Sequence[str], records: Any, summary: Any = None):
        self._keys = tuple(keys)
        self._iter = PeekingIterator(records)
        self._summary = summary
        self._open: bool = True
        self._current: Optional[Record] = None
        self._position: int = -1
        self._limit: int = -1
        self._logger = logging.getLogger(f"DB.{self.__class__.__name__}")

    ### Magic Context Methods for Cursors.
    async def __aenter__(self) -> "ResultCursor":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._open:
            await self.close()

    def __aiter__(self) -> "ResultCursor":
        """The cursor is also an async iterator."""
        return self

    async def __anext__(self) -> Record:
        """Use `cursor.next()` to provide an async iterable.

        raise: StopAsyncIteration when done.
        """
        if await self.next():
            return self._current
        raise StopAsyncIteration

    def __repr__(self) -> str:
        return f"<ResultCursor {list(self._keys)!r} position={self._position}>"

    ### Metadata
    def is_open(self) -> bool:
        return self._open

    def keys(self) -> list:
        return list(self._keys)

    def size(self) -> int:
        return len(self._keys)

    def contains_key(self, key: str) -> bool:
        return key in self._keys

    def index(self, key: str) -> int:
        return self.record().index(key)

    def get(self, key: Union[str, int]) -> Any:
        return self.record()[key]

    ### Position
    def record(self) -> Record:
        self._assert_open()
        if self._current is not None:
            return self._current
        raise NoSuchRecord(
            "In order to access the fields of a record in a result, "
            "you must first call next() to point the result to the next record in the result stream."
        )

    def position(self) -> int:
        self._assert_open()
        return self._position

    async def at_end(self) -> bool:
        self._assert_open()
        return not await self._iter.has_next()

    async def next(self) -> bool:
        """Moves the cursor to the next record.

        Returns False, without failing, when no record is left; the
        cursor then has no current record.
        """
        self._assert_open()
        if not await self._iter.has_next():
            self._current = None
            return False
        self._current = await self._iter.next()
        self._position += 1
        if self._position == self._limit:
            await self._discard()
        return True

    async def skip(self, records: int) -> int:
        if records < 0:
            raise ClientError("Cannot skip negative number of elements")
        self._assert_open()
        skipped = 0
        while skipped < records and await self.next():
            skipped += 1
        return skipped

    async def limit(self, records: int) -> int:
        """Caps how far the cursor may move from its current position.

        The limit is absolute: limit(0) stops the cursor right where it
        is, even before the first record.
        """
        if records < 0:
            raise ClientError("Cannot limit negative number of elements")
        self._assert_open()
        if records == 0:
            self._limit = self._position
            await self._discard()
        else:
            self._limit = self._position + records
        return self._limit

    async def peek(self) -> Record:
        self._assert_open()
        try:
            return await self._iter.peek()
        except StopAsyncIteration as err:
            raise NoSuchRecord(
                "Cannot peek past the last record of this result."
            ) from err

    ### Positional access
    async def first(self, key: Union[str, int, None] = None) -> Any:
        if self.position() >= 1:
            raise NoSuchRecord(
                "Cannot retrieve the first record, because this result cursor has been moved already. "
                "Please ensure you are not calling `first` multiple times, or are mixing it with calls "
                "to `next`, `single`, `list` or any other method that changes the position of the cursor."
            )
        if self._position == -1 and not await self.next():
            raise NoSuchRecord(
                "Cannot retrieve the first record, because this result is empty."
            )
        record = self.record()
        return record if key is None else record[key]

    async def single(self, key: Union[str, int, None] = None) -> Any:
        record = await self.first()
        if await self._iter.has_next():
            raise NoSuchRecord(
                "Expected a result with a single record, but this result contains at least one more. "
                "Ensure your query returns only one record, or use `first` instead of `single` if "
                "you do not care about the number of records in the result."
            )
        return record if key is None else record[key]

    ### Bulk access
    async def list(self, map_fn: Optional[Callable[["ResultCursor"], Any]] = None) -> list:
        """Retrieves every remaining record, mapped through map_fn.

        Only allowed from the first record: on a fresh cursor or one
        positioned exactly at the first record.
        """
        if map_fn is None:
            map_fn = record_as_is
        self._assert_open()
        if self._position == -1 and not await self._iter.has_next():
            return []
        if self._position == 0 or (self._position == -1 and await self.next()):
            result = []
            while self._current is not None:
                result.append(map_fn(self))
                await self.next()
            await self._discard()
            return result
        raise ClientError(
            f"Can't retain records when cursor is not pointing at the first record "
            f"(currently at position {self._position})"
        )

    async def summarize(self) -> Any:
        while await self.next():
            pass
        await self._discard()
        return self._summary

    async def close(self) -> None:
        if not self._open:
            raise ClientError("Already closed")
        await self._discard()
        self._open = False
        self._logger.debug(
            f"Cursor closed at position {self._position}"
        )

    def _assert_open(self) -> None:
        if not self._open:
            raise ClientError("Cursor already closed")

    async def _discard(self) -> None:
        if not self._iter.exhausted:
            self._logger.debug(
                f"Discarding remaining records at position {self._position}"
            )
        await self._iter.discard()
