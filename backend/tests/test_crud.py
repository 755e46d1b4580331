"""
Tests for the query history store.
"""

import pytest
import pytest_asyncio

from core.database.crud import clear_query_history, create_history_item, get_query_history
from core.database.session import build_engine, build_session_factory, init_db


@pytest_asyncio.fixture
async def db_session(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'history.db'}")
    await init_db(engine)
    session_factory = build_session_factory(engine)

    async with session_factory() as session:
        yield session

    await engine.dispose()


async def _add(db, n, timestamp):
    return await create_history_item(
        db=db,
        input_text=f"input {n}",
        platform="sentry",
        query=f"query {n}",
        timestamp=timestamp
    )


@pytest.mark.asyncio
async def test_create_assigns_id(db_session):
    item = await _add(db_session, 1, 1000)

    assert item.id is not None
    assert item.input == "input 1"
    assert item.platform == "sentry"
    assert item.timestamp == 1000


@pytest.mark.asyncio
async def test_history_is_newest_first(db_session):
    await _add(db_session, 1, 1000)
    await _add(db_session, 2, 3000)
    await _add(db_session, 3, 2000)

    items = await get_query_history(db_session)

    assert [item.input for item in items] == ["input 2", "input 3", "input 1"]


@pytest.mark.asyncio
async def test_equal_timestamps_ordered_by_insertion(db_session):
    await _add(db_session, 1, 1000)
    await _add(db_session, 2, 1000)

    items = await get_query_history(db_session)

    assert [item.input for item in items] == ["input 2", "input 1"]


@pytest.mark.asyncio
async def test_limit(db_session):
    for n in range(15):
        await _add(db_session, n, 1000 + n)

    assert len(await get_query_history(db_session)) == 10
    assert len(await get_query_history(db_session, limit=3)) == 3
    assert (await get_query_history(db_session, limit=1))[0].input == "input 14"


@pytest.mark.asyncio
async def test_empty_history(db_session):
    assert await get_query_history(db_session) == []


@pytest.mark.asyncio
async def test_clear(db_session):
    await _add(db_session, 1, 1000)
    await _add(db_session, 2, 2000)

    cleared = await clear_query_history(db_session)

    assert cleared == 2
    assert await get_query_history(db_session) == []
