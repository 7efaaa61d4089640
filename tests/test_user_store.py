from user_cluster_api.app.schemas.user import create_user
from user_cluster_api.app.services.user_store import UserStore, seed_users


def test_store_is_seeded_with_three_users(store):
    users = store.list_users()
    assert [user.id for user in users] == [1, 2, 3]
    assert users == seed_users()
    assert len(store) == 3


def test_list_users_returns_a_snapshot(store):
    snapshot = store.list_users()
    assert isinstance(snapshot, tuple)
    assert store.list_users() == snapshot
    assert store.list_users() is not snapshot


def test_store_accepts_explicit_users_in_order():
    users = [create_user(9, "Nine", "9@example.com"), create_user(4, "Four", "4@example.com")]
    store = UserStore(users)
    assert [user.id for user in store.list_users()] == [9, 4]


def test_empty_store():
    assert UserStore([]).list_users() == ()


def test_stores_do_not_share_state():
    users = [create_user(1, "One", "one@example.com")]
    first = UserStore(users)
    users.append(create_user(2, "Two", "two@example.com"))
    second = UserStore()
    assert len(first) == 1
    assert len(second) == 3
