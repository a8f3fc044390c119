from concurrent.futures import ThreadPoolExecutor

import pytest

from services.users.domain.user import User
from services.users.infrastructure.ids import SequentialIdProvider
from services.users.infrastructure.memory_users import InMemoryUserRepository


def test_sequential_ids_are_distinct_under_concurrency():
    provider = SequentialIdProvider()

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: provider.generate(), range(500)))

    assert sorted(ids) == list(range(1, 501))


def test_list_preserves_insertion_order():
    repository = InMemoryUserRepository()
    for user_id in (3, 1, 2):
        repository.add(User(user_id=user_id, name=f"u{user_id}", email="u@example.com"))

    assert [user.user_id for user in repository.list()] == [3, 1, 2]


def test_add_rejects_duplicate_id():
    repository = InMemoryUserRepository()
    repository.add(User(user_id=1, name="Ada", email="ada@example.com"))

    with pytest.raises(ValueError):
        repository.add(User(user_id=1, name="Alan", email="alan@example.com"))


def test_replace_and_remove_report_missing_ids():
    repository = InMemoryUserRepository()

    assert repository.replace(User(user_id=4, name="Ada", email="ada@example.com")) is None
    assert repository.remove(4) is False


def test_list_returns_a_copy():
    repository = InMemoryUserRepository()
    repository.add(User(user_id=1, name="Ada", email="ada@example.com"))

    listing = repository.list()
    listing.clear()

    assert len(repository.list()) == 1
