import pytest

from user_management.adapters.outbound.persistence.models import User, UserGroup
from user_management.adapters.outbound.persistence.repositories import group_repository, user_repository
from user_management.domain.exceptions import DatabaseOperationException, ResourceAlreadyExistsException


def _user(email="jane.smith@example.com", group_ids=(1,)):
    return User(
        first_name="Jane",
        last_name="Smith",
        email=email,
        user_groups=[UserGroup(group_id=group_id) for group_id in group_ids],
    )


@pytest.mark.asyncio
async def test_create_assigns_id_and_timestamp(db_session):
    user = await user_repository.create(db_session, obj_in=_user())

    assert user.id is not None
    assert user.created_at is not None
    assert user.updated_at is None


@pytest.mark.asyncio
async def test_hydrate_loads_group_names(db_session):
    created = await user_repository.create(db_session, obj_in=_user(group_ids=(1, 3)))

    user = await user_repository.hydrate(db_session, created.id)

    assert [group.name for group in user.groups] == ["Admin", "Level 2"]


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none(db_session):
    assert await user_repository.get_by_id(db_session, 9999) is None


@pytest.mark.asyncio
async def test_get_all_returns_users_ordered_by_id(db_session):
    first = await user_repository.create(db_session, obj_in=_user("first@example.com"))
    second = await user_repository.create(db_session, obj_in=_user("second@example.com", group_ids=()))

    users = await user_repository.get_all(db_session)

    assert [user.id for user in users] == [first.id, second.id]


@pytest.mark.asyncio
async def test_duplicate_email_raises_already_exists(db_session):
    await user_repository.create(db_session, obj_in=_user())

    with pytest.raises(ResourceAlreadyExistsException):
        await user_repository.create(db_session, obj_in=_user())


@pytest.mark.asyncio
async def test_unknown_group_raises_database_error(db_session):
    with pytest.raises(DatabaseOperationException):
        await user_repository.create(db_session, obj_in=_user(group_ids=(42,)))


@pytest.mark.asyncio
async def test_update_to_taken_email_raises_already_exists(db_session):
    await user_repository.create(db_session, obj_in=_user("taken@example.com"))
    created = await user_repository.create(db_session, obj_in=_user("free@example.com", group_ids=(2,)))
    user_id = created.id
    user = await user_repository.get_by_id(db_session, user_id)
    user.email = "taken@example.com"

    with pytest.raises(ResourceAlreadyExistsException) as exc_info:
        await user_repository.update(db_session, db_obj=user, group_ids=[3])

    assert "unique" in str(exc_info.value).lower()
    reloaded = await user_repository.hydrate(db_session, user_id)
    assert reloaded.email == "free@example.com"
    assert [group.id for group in reloaded.groups] == [2]


@pytest.mark.asyncio
async def test_update_with_unknown_group_raises_database_error(db_session):
    created = await user_repository.create(db_session, obj_in=_user())
    user = await user_repository.get_by_id(db_session, created.id)

    with pytest.raises(DatabaseOperationException):
        await user_repository.update(db_session, db_obj=user, group_ids=[42])


@pytest.mark.asyncio
async def test_update_replaces_memberships(db_session):
    created = await user_repository.create(db_session, obj_in=_user(group_ids=(1, 2)))
    user = await user_repository.get_by_id(db_session, created.id)
    user.first_name = "Janet"

    await user_repository.update(db_session, db_obj=user, group_ids=[2, 3])
    reloaded = await user_repository.hydrate(db_session, created.id)

    assert reloaded.first_name == "Janet"
    assert reloaded.updated_at is not None
    assert [group.id for group in reloaded.groups] == [2, 3]


@pytest.mark.asyncio
async def test_update_with_empty_list_removes_every_membership(db_session):
    created = await user_repository.create(db_session, obj_in=_user(group_ids=(1, 2)))
    user = await user_repository.get_by_id(db_session, created.id)

    await user_repository.update(db_session, db_obj=user, group_ids=[])
    reloaded = await user_repository.hydrate(db_session, created.id)

    assert reloaded.groups == []


@pytest.mark.asyncio
async def test_delete_reports_whether_a_row_was_removed(db_session):
    created = await user_repository.create(db_session, obj_in=_user())

    assert await user_repository.delete(db_session, id=created.id) is True
    assert await user_repository.delete(db_session, id=created.id) is False
    assert await user_repository.exists(db_session, created.id) is False


@pytest.mark.asyncio
async def test_count_and_count_by_group(db_session):
    await user_repository.create(db_session, obj_in=_user("a@example.com", group_ids=(1, 2)))
    await user_repository.create(db_session, obj_in=_user("b@example.com", group_ids=(2,)))

    assert await user_repository.count(db_session) == 2
    assert await user_repository.count_by_group(db_session) == [
        (1, "Admin", 1),
        (2, "Level 1", 2),
        (3, "Level 2", 0),
    ]


@pytest.mark.asyncio
async def test_groups_carry_their_permissions(db_session):
    groups = await group_repository.get_all(db_session)

    assert [group.name for group in groups] == ["Admin", "Level 1", "Level 2"]
    assert [permission.name for permission in groups[0].permissions] == [
        "Read", "Write", "Delete", "Manage Users"
    ]
    assert [permission.id for permission in groups[2].permissions] == [1, 2]
