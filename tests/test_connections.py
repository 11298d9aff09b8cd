import pytest
from asynccursor import (
    AsyncDriver,
    Config,
    ResultCursor,
    basic_auth,
    routing_driver_from_first_available_address
)
from asynccursor.drivers.bolt import bolt
from asynccursor.drivers.dummy import dummy
from asynccursor.drivers.routing import routing
from asynccursor.exceptions import (
    DriverError,
    EmptyStatement,
    NoSuchRecord,
    ServiceUnavailable
)


pytestmark = pytest.mark.asyncio


async def test_factory_by_scheme():
    pytest.assume(isinstance(AsyncDriver("dummy://localhost"), dummy))
    pytest.assume(isinstance(AsyncDriver("bolt://localhost"), bolt))
    pytest.assume(isinstance(AsyncDriver("bolt+routing://localhost:7688"), routing))


async def test_factory_defaults():
    db = AsyncDriver("bolt://localhost")
    assert db.config == Config.default()
    assert db.auth.scheme == "none"
    assert db.address == "localhost:7687"
    assert db.is_connected() is False


async def test_factory_unknown_scheme():
    with pytest.raises(DriverError, match="Unsupported URI scheme"):
        AsyncDriver("http://localhost")


async def test_factory_invalid_port():
    with pytest.raises(DriverError):
        AsyncDriver("bolt://localhost:notaport")


async def test_run(conn, records):
    cursor = await conn.run("RETURN a", {"limit": 3})
    assert isinstance(cursor, ResultCursor)
    assert cursor.keys() == ["a"]
    assert await cursor.list() == records
    summary = await cursor.summarize()
    assert summary.statement == "RETURN a"
    assert summary.parameters == {"limit": 3}
    assert summary.server == "localhost"
    assert summary.result_consumed_after is not None


async def test_run_unknown_statement(conn):
    cursor = await conn.run("RETURN b")
    assert cursor.keys() == []
    with pytest.raises(NoSuchRecord):
        await cursor.single()


async def test_run_empty_statement(conn):
    with pytest.raises(EmptyStatement):
        await conn.run("")


async def test_dummy_context(rows):
    async with AsyncDriver("dummy://localhost", data={"RETURN a": rows}) as db:
        assert db.is_connected() is True
        async with await db.run("RETURN a") as cursor:
            assert await cursor.first("a") == 1
        assert cursor.is_open() is False
    assert db.is_connected() is False


async def test_bolt_connection(server):
    host, port = server
    db = AsyncDriver(f"bolt://{host}:{port}", auth=basic_auth("neo4j", "secret"))
    try:
        await db.connection()
        assert db.is_connected() is True
        assert db.get_connection() is not None
    finally:
        await db.close()
    assert db.is_closed() is True


async def test_bolt_unavailable(closed_port):
    db = AsyncDriver(f"bolt://127.0.0.1:{closed_port}")
    with pytest.raises(ServiceUnavailable, match="Unable to connect"):
        await db.connection()
    assert db.is_connected() is False


async def test_routing_first_available(server, closed_port):
    host, port = server
    db = await routing_driver_from_first_available_address(
        [f"127.0.0.1:{closed_port}", f"{host}:{port}"]
    )
    try:
        assert isinstance(db, routing)
        assert db.address == f"{host}:{port}"
        assert db.uri.startswith("bolt+routing://")
        assert db.is_connected() is True
    finally:
        await db.close()


async def test_routing_none_available(closed_port):
    with pytest.raises(ServiceUnavailable, match="Failed to discover an available server"):
        await routing_driver_from_first_available_address(
            [f"127.0.0.1:{closed_port}", f"127.0.0.1:{closed_port}"],
            config=Config(connection_timeout=1.0)
        )
