"""
Tests for UserRepository.

Runs real queries against in-memory SQLite.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import DataError

from app.domain.entities.UserEntity import UserEntity
from app.domain.repositories.user_repository import UserRepository


def _add(repo, name, email, age=None) -> UserEntity:
    return repo.create_user(UserEntity(name=name, email=email, age=age))


class TestLookups:
    """Tests for id/email lookups."""

    def test_create_assigns_id(self, repo) -> None:
        """The store assigns an integer id on insert."""
        user = _add(repo, "Alice", "alice@example.com", 30)
        assert isinstance(user.id, int)
        assert repo.get_by_id(user.id).email == "alice@example.com"

    def test_get_by_email_is_exact(self, repo) -> None:
        """Email lookup does not do partial matches."""
        _add(repo, "Alice", "alice@example.com")
        assert repo.get_by_email("alice@example.com") is not None
        assert repo.get_by_email("alice@example") is None

    def test_exists_by_id(self, repo) -> None:
        """exists_by_id reflects inserts and deletes."""
        user = _add(repo, "Alice", "alice@example.com")
        assert repo.exists_by_id(user.id) is True
        assert repo.delete_by_id(user.id) is True
        assert repo.exists_by_id(user.id) is False
        assert repo.get_by_id(user.id) is None

    def test_get_all_ordered_by_id(self, repo) -> None:
        """get_all returns users in insertion order."""
        first = _add(repo, "Bob", "bob@example.com")
        second = _add(repo, "Alice", "alice@example.com")
        assert [u.id for u in repo.get_all()] == [first.id, second.id]


class TestSearchByName:
    """Tests for case-insensitive name search."""

    def test_case_insensitive_substring(self, repo) -> None:
        """Fragments match anywhere in the name regardless of case."""
        _add(repo, "Alice Cooper", "alice@example.com")
        _add(repo, "Bob", "bob@example.com")
        names = [u.name for u in repo.search_by_name("COOP")]
        assert names == ["Alice Cooper"]

    def test_like_wildcards_are_literal(self, repo) -> None:
        """'%' and '_' in the fragment do not act as wildcards."""
        _add(repo, "100% Real", "real@example.com")
        _add(repo, "Bob", "bob@example.com")
        assert [u.name for u in repo.search_by_name("%")] == ["100% Real"]
        assert repo.search_by_name("_") == []


class TestAgeQueries:
    """Tests for age range and count predicates."""

    def test_age_range_inclusive_and_skips_unknown_age(self, repo) -> None:
        """Both bounds are inclusive; users without age are excluded."""
        _add(repo, "A", "a@example.com", 18)
        _add(repo, "B", "b@example.com", 30)
        _add(repo, "C", "c@example.com", 31)
        _add(repo, "D", "d@example.com", None)
        names = [u.name for u in repo.get_by_age_range(18, 30)]
        assert names == ["A", "B"]

    def test_counts(self, repo) -> None:
        """count_by_age_greater_than ignores users without age."""
        _add(repo, "A", "a@example.com", 17)
        _add(repo, "B", "b@example.com", 18)
        _add(repo, "C", "c@example.com", None)
        assert repo.count() == 3
        assert repo.count_by_age_greater_than(17) == 1


class TestUniqueEmailConstraint:
    """The database rejects duplicate emails even without the service pre-check."""

    def test_duplicate_insert_raises_value_error(self, repo) -> None:
        """IntegrityError is rolled back and surfaced as ValueError."""
        _add(repo, "Alice", "alice@example.com")
        with pytest.raises(ValueError, match="already exists"):
            _add(repo, "Bob", "alice@example.com")
        # session is still usable after the rollback
        assert repo.count() == 1

    def test_duplicate_on_save_raises_value_error(self, repo) -> None:
        """Changing an email to one already taken fails at commit."""
        _add(repo, "Alice", "alice@example.com")
        bob = _add(repo, "Bob", "bob@example.com")
        bob.email = "alice@example.com"
        with pytest.raises(ValueError):
            repo.save(bob)
        assert repo.get_by_id(bob.id).email == "bob@example.com"


class TestColumnErrors:
    """Database type errors surface as ValueError."""

    def test_data_error_is_rolled_back(self) -> None:
        """A value the column types reject becomes ValueError after a rollback."""
        db = MagicMock()
        db.commit.side_effect = DataError("INSERT", {}, Exception("Data too long for column 'name'"))
        repo = UserRepository(db)
        with pytest.raises(ValueError, match="does not fit"):
            repo.create_user(UserEntity(name="x" * 500, email="long@example.com"))
        db.rollback.assert_called_once()
        db.refresh.assert_not_called()


class TestDelete:
    """Tests for delete_by_id."""

    def test_missing_id_reports_false(self, repo) -> None:
        """Deleting an unknown id is reported instead of passing silently."""
        _add(repo, "Alice", "alice@example.com")
        assert repo.delete_by_id(999) is False
        assert repo.count() == 1
