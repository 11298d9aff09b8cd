from collections.abc import AsyncGenerator, Awaitable
import asyncio
import socket
import pytest
import pytest_asyncio
from asynccursor import AsyncDriver, ResultCursor
from asynccursor.drivers.dummy import dummyStream
from asynccursor.meta import Record, ResultSummary


ROWS = [{"a": 1}, {"a": 2}, {"a": 3}]


def make_cursor(rows: list, keys: list = None) -> tuple:
    """Cursor over an async stream of rows, with the stream and summary."""
    if keys is None:
        keys = list(rows[0].keys()) if rows else []
    summary = ResultSummary(statement="RETURN a")
    stream = dummyStream(keys, rows, summary)
    return ResultCursor(keys, stream, summary), stream, summary


@pytest.fixture()
def rows():
    return list(ROWS)


@pytest.fixture()
def records(rows):
    return [Record.from_dict(row) for row in rows]


@pytest.fixture()
def cursor(rows):
    cur, _, _ = make_cursor(rows)
    return cur


@pytest.fixture()
def stream_cursor(rows):
    return make_cursor(rows)


@pytest_asyncio.fixture()
async def conn(rows) -> AsyncGenerator[Awaitable, None]:
    db = AsyncDriver("dummy://localhost", data={"RETURN a": rows})
    await db.connection()
    yield db
    await db.close()


@pytest_asyncio.fixture()
async def server() -> AsyncGenerator[tuple, None]:
    """A local listener accepting (and dropping) connections."""
    async def handle(reader, writer):
        writer.close()

    srv = await asyncio.start_server(handle, "127.0.0.1", 0)
    host, port = srv.sockets[0].getsockname()[:2]
    yield host, port
    srv.close()
    await srv.wait_closed()


@pytest.fixture()
def closed_port() -> int:
    """A port nothing listens on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture()
def cursor_factory():
    return make_cursor
