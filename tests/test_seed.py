"""
Tests for the seed script.
"""

from migrations.seed.seed_users import USERS_DATA, seed_users


class TestSeedUsers:
    """seed_users is idempotent on email."""

    def test_seed_twice_inserts_once(self, db_session, repo) -> None:
        assert seed_users(db_session) == len(USERS_DATA)
        assert seed_users(db_session) == 0
        assert repo.count() == len(USERS_DATA)
