"""
Integration tests for user data access
"""

import pytest
from datetime import datetime, timedelta
from repositories.user_repository import UserRepository
from schemas.user import User, UserFilter, UserStatus


@pytest.mark.asyncio
async def test_find_all_ordered_by_last_then_first_name(seeded_session):
    users = await UserRepository(seeded_session).find_all()

    assert [u.last_name for u in users] == ["Brown", "Doe", "Johnson", "Smith", "Williams"]


@pytest.mark.asyncio
async def test_active_lookups(seeded_session):
    repository = UserRepository(seeded_session)
    bob = await repository.find_by_email("bob@example.com")

    assert len(await repository.find_active_users()) == 4
    assert bob.active is False
    assert await repository.find_by_id_and_active(bob.id) is None
    assert (await repository.find_by_id(bob.id)).email == "bob@example.com"


@pytest.mark.asyncio
async def test_find_by_email_and_status(seeded_session):
    repository = UserRepository(seeded_session)

    assert (await repository.find_by_email_and_status("john@example.com", UserStatus.ACTIVE)).first_name == "John"
    assert await repository.find_by_email_and_status("john@example.com", UserStatus.INACTIVE) is None


@pytest.mark.asyncio
async def test_find_by_filter_applies_min_age(seeded_session):
    repository = UserRepository(seeded_session)

    assert len(await repository.find_by_filter(UserFilter(email="john@example.com", min_age=30))) == 1
    assert await repository.find_by_filter(UserFilter(email="john@example.com", min_age=31)) == []


@pytest.mark.asyncio
async def test_age_range_is_inclusive(seeded_session):
    users = await UserRepository(seeded_session).find_users_by_age_range(28, 33)

    assert sorted(u.age for u in users) == [28, 30, 33]


@pytest.mark.asyncio
async def test_summaries_join_names(seeded_session):
    summaries = await UserRepository(seeded_session).get_user_summaries()

    assert {s.full_name for s in summaries} >= {"John Doe", "Alice Williams"}


@pytest.mark.asyncio
async def test_group_by_department(seeded_session):
    grouped = await UserRepository(seeded_session).get_users_by_department()

    assert {dept: len(users) for dept, users in grouped.items()} == {
        "Engineering": 3,
        "Marketing": 1,
        "Sales": 1,
    }


@pytest.mark.asyncio
async def test_count_active_via_stream(seeded_session):
    assert await UserRepository(seeded_session).count_active_users_via_stream() == 4


@pytest.mark.asyncio
async def test_insert_variants(db_session):
    repository = UserRepository(db_session)

    assert await repository.insert_simple(User(email="simple@example.com", first_name="Sim", active=False)) == 1
    user_id = await repository.insert_with_generated_keys(
        User(email="keyed@example.com", first_name="Key", last_name="Ed", age=99)
    )
    found = await repository.find_by_id(user_id)

    assert found.first_name == "Key"
    assert found.active is True
    assert found.age is None
    assert found.created_date is not None
    assert (await repository.find_by_email("simple@example.com")).active is False


@pytest.mark.asyncio
async def test_save_inserts_then_updates(db_session):
    repository = UserRepository(db_session)

    user = await repository.save(User(email="save@example.com", first_name="Sa", last_name="Ve", age=40))
    assert user.id is not None
    first_modified = user.last_modified

    user.department = "Support"
    await repository.save(user)
    found = await repository.find_by_id(user.id)

    assert found.department == "Support"
    assert found.age == 40
    assert found.last_modified >= first_modified


@pytest.mark.asyncio
async def test_update_email_and_delete(seeded_session):
    repository = UserRepository(seeded_session)
    jane = await repository.find_by_email("jane@example.com")

    assert await repository.update_email(jane.id, "jane.smith@example.com") == 1
    assert await repository.find_by_email("jane@example.com") is None
    assert await repository.delete_by_id(jane.id) == 1
    assert await repository.delete_by_id(jane.id) == 0


@pytest.mark.asyncio
async def test_purge_inactive_users_created_before_cutoff(seeded_session):
    repository = UserRepository(seeded_session)

    assert await repository.delete_inactive_old_users(datetime.utcnow() - timedelta(days=30)) == 0
    assert await repository.delete_inactive_old_users(datetime.utcnow() + timedelta(days=1)) == 1
    assert await repository.find_by_email("bob@example.com") is None
    assert len(await repository.find_all()) == 4
