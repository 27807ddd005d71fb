"""Leader Store — direct calls, no HTTP layer.

Tests:
    - Typed errors carry the right ErrorKind for each failure
    - update_by_id checks the identifier before the payload
    - list() order, clamping and clear() row counts
"""

from uuid import uuid4

import pytest

from leader_service.core.errors import (
    DuplicateKeyError, ErrorKind, NotFoundError, ValidationError,
)


async def test_create_assigns_id_and_submitted(store):
    leader = await store.create({"firstName": "Ada", "lastName": "Lovelace"})
    assert leader.id is not None
    assert leader.submitted is not None


async def test_create_accepts_python_field_names(store):
    leader = await store.create({"first_name": "Ada", "last_name": "Lovelace"})
    assert leader.first_name == "Ada"


async def test_create_strips_whitespace(store):
    leader = await store.create({"firstName": "  Ada ", "lastName": "Lovelace"})
    assert leader.first_name == "Ada"


@pytest.mark.parametrize("fields", [
    None,
    {},
    {"firstName": "Ada"},
    {"lastName": "Lovelace"},
    {"firstName": "", "lastName": "Lovelace"},
    {"firstName": 42, "lastName": "Lovelace"},
    {"firstName": "A" * 201, "lastName": "Lovelace"},
])
async def test_create_rejects_invalid_fields(store, fields):
    with pytest.raises(ValidationError) as exc_info:
        await store.create(fields)
    assert exc_info.value.kind is ErrorKind.VALIDATION
    assert "validation failed" in exc_info.value.message.lower()


async def test_create_duplicate_raises_duplicate_key(store):
    await store.create({"firstName": "Ada", "lastName": "Lovelace"})
    with pytest.raises(DuplicateKeyError) as exc_info:
        await store.create({"firstName": "Ada", "lastName": "Lovelace"})
    assert exc_info.value.kind is ErrorKind.DUPLICATE_KEY


async def test_duplicate_failure_leaves_store_usable(store):
    await store.create({"firstName": "Ada", "lastName": "Lovelace"})
    with pytest.raises(DuplicateKeyError):
        await store.create({"firstName": "Ada", "lastName": "Lovelace"})

    other = await store.create({"firstName": "Grace", "lastName": "Hopper"})
    assert (await store.get_by_id(str(other.id))).first_name == "Grace"


async def test_get_by_id_accepts_uuid_and_string(store, mock_leader):
    leader = await mock_leader.create_one()
    assert (await store.get_by_id(leader.id)).id == leader.id
    assert (await store.get_by_id(str(leader.id))).id == leader.id


@pytest.mark.parametrize("leader_id", ["not-an-id", "5952a8d5c1b8d566a64ea23g", ""])
async def test_get_by_id_malformed_raises_not_found(store, leader_id):
    with pytest.raises(NotFoundError) as exc_info:
        await store.get_by_id(leader_id)
    assert exc_info.value.kind is ErrorKind.NOT_FOUND


async def test_get_by_id_unknown_raises_not_found(store):
    with pytest.raises(NotFoundError):
        await store.get_by_id(str(uuid4()))


async def test_list_returns_insertion_order(store, mock_leader):
    created = await mock_leader.create_many(5)
    listed = await store.list(1)
    assert [leader.id for leader in listed] == [leader.id for leader in created]


async def test_list_clamps_pages_below_one(store, mock_leader):
    await mock_leader.create_many(12)
    first = [leader.id for leader in await store.list(1)]
    assert [leader.id for leader in await store.list(0)] == first
    assert [leader.id for leader in await store.list(-3)] == first


async def test_list_empty_store_returns_empty(store):
    assert await store.list() == []


@pytest.mark.parametrize("page", [10**18, 10**20])
async def test_list_far_past_last_page_returns_empty(store, mock_leader, page):
    await mock_leader.create_many(3)
    assert await store.list(page) == []


async def test_update_checks_identifier_before_payload(store):
    with pytest.raises(NotFoundError):
        await store.update_by_id("bogus", {})


async def test_update_empty_payload_raises_validation(store, mock_leader):
    leader = await mock_leader.create_one()
    with pytest.raises(ValidationError):
        await store.update_by_id(leader.id, {"submitted": "2000-01-01"})


async def test_update_keeps_submitted(store, mock_leader):
    leader = await mock_leader.create_one()
    before = await store.get_by_id(leader.id)

    updated = await store.update_by_id(leader.id, {"lastName": "Hopper"})

    assert updated.last_name == "Hopper"
    assert updated.first_name == before.first_name
    assert updated.submitted == before.submitted


async def test_delete_removes_record(store, mock_leader):
    leader = await mock_leader.create_one()
    assert await store.delete_by_id(leader.id) is None
    with pytest.raises(NotFoundError):
        await store.get_by_id(leader.id)


async def test_delete_unknown_raises_not_found(store):
    with pytest.raises(NotFoundError):
        await store.delete_by_id(uuid4())


async def test_clear_returns_removed_count(store, mock_leader):
    await mock_leader.create_many(3)
    assert await store.clear() == 3
    assert await store.list() == []
