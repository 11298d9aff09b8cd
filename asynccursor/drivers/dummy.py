"""Dummy Driver.

In-memory driver: results come from a dict of statement -> rows, streamed
lazily through a ResultCursor.
"""
import time
import asyncio
from typing import Any, Optional
from collections.abc import Mapping, Sequence
from ..cursor import ResultCursor
from ..exceptions import EmptyStatement
from ..meta import Record, ResultSummary
from .abstract import BaseDriver


class dummyStream:
    """
    dummyStream.

    Async iterator producing Records one at a time, the way a network
    result would arrive. Timing on the summary is completed when the
    stream runs out or is closed.
    """

    def __init__(self, keys: list, rows: Sequence[Mapping], summary: ResultSummary):
        self._keys = keys
        self._rows = rows
        self._summary = summary
        self._idx = 0
        self._started = time.monotonic()
        self._closed = False
        summary.result_available_after = 0

    def __aiter__(self) -> "dummyStream":
        return self

    async def __anext__(self) -> Record:
        if self._closed or self._idx >= len(self._rows):
            await self.aclose()
            raise StopAsyncIteration
        # yield control, as a network read would
        await asyncio.sleep(0)
        row = self._rows[self._idx]
        self._idx += 1
        return Record(self._keys, [row.get(key) for key in self._keys])

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._summary.result_consumed_after = int(
            (time.monotonic() - self._started) * 1000
        )

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def produced(self) -> int:
        return self._idx


class dummy(BaseDriver):
    _provider: str = "dummy"

    def __init__(
        self,
        uri: str = "dummy://localhost",
        auth=None,
        config=None,
        data: Optional[Mapping[str, Sequence[Mapping]]] = None,
        **kwargs
    ):
        super(dummy, self).__init__(uri, auth=auth, config=config, **kwargs)
        self._data = dict(data) if data else {}
        self._logger.debug(
            f"Dummy driver with {len(self._data)} statements"
        )

    async def connection(self) -> "dummy":
        self._mark_connected()
        return self

    async def close(self) -> None:
        self._connected = False

    async def valid_operation(self, statement: Any):
        if not statement:
            raise EmptyStatement(
                f"{__name__!s} Error: cannot use an empty statement"
            )
        if not self._connected:
            await self.connection()

    async def run(self, statement: str, parameters: Optional[dict] = None) -> ResultCursor:
        """
        Runs a statement, returning a cursor over its rows.
        """
        await self.valid_operation(statement)
        rows = self._data.get(statement, [])
        keys = list(rows[0].keys()) if rows else []
        summary = ResultSummary(
            statement=statement,
            parameters=dict(parameters or {}),
            server=self.address
        )
        return ResultCursor(keys, dummyStream(keys, rows, summary), summary)
