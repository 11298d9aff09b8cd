import asyncio
from asynccursor import AsyncDriver


DATA = {
    "MATCH (p:Person) RETURN p.name AS name, p.born AS born": [
        {"name": "Keanu Reeves", "born": 1964},
        {"name": "Carrie-Anne Moss", "born": 1967},
        {"name": "Laurence Fishburne", "born": 1961},
        {"name": "Hugo Weaving", "born": 1960},
    ]
}
QUERY = "MATCH (p:Person) RETURN p.name AS name, p.born AS born"


async def db():
    async with AsyncDriver("dummy://localhost", data=DATA) as conn:
        print(f"Is Connected: {conn.is_connected()}")
        # walking the cursor
        cursor = await conn.run(QUERY)
        while await cursor.next():
            print(cursor.position(), cursor.record())
        summary = await cursor.summarize()
        print(f"Consumed after: {summary.result_consumed_after} ms")
        await cursor.close()
        # only the first two records
        async with await conn.run(QUERY) as cursor:
            await cursor.limit(2)
            print([record["name"] async for record in cursor])
        # bulk retrieval
        cursor = await conn.run(QUERY)
        print(await cursor.list(lambda cur: cur.get("born")))
        await cursor.close()

if __name__ == '__main__':
    asyncio.run(db())
