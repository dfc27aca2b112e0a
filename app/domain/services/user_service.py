import logging
import re
from fastapi import Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.domain.entities.UserEntity import UserEntity, NAME_MAX_LENGTH, EMAIL_MAX_LENGTH
from app.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
ADULT_AGE_THRESHOLD = 17


def is_valid_email(email: str | None) -> bool:
    if not email:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _check_lengths(name: str | None, email: str | None):
    if name is not None and len(name) > NAME_MAX_LENGTH:
        raise ValueError(f"Name cannot be longer than {NAME_MAX_LENGTH} characters")
    if email is not None and len(email) > EMAIL_MAX_LENGTH:
        raise ValueError(f"Email cannot be longer than {EMAIL_MAX_LENGTH} characters")


class UserService:
    """Validation and business rules for user records.

    Every rule violation is raised as ``ValueError``; the controllers decide
    which HTTP status each one maps to.
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    def get_all_users(self) -> list[UserEntity]:
        return self.repo.get_all()

    def get_user_by_id(self, user_id: int) -> UserEntity | None:
        return self.repo.get_by_id(user_id)

    def get_user_by_email(self, email: str | None) -> UserEntity | None:
        if _is_blank(email):
            raise ValueError("Email cannot be null or empty")
        return self.repo.get_by_email(email)

    def create_user(self, name: str | None, email: str | None, age: int | None = None) -> UserEntity:
        if _is_blank(name):
            raise ValueError("Name cannot be null or empty")
        if _is_blank(email):
            raise ValueError("Email cannot be null or empty")
        if not is_valid_email(email):
            raise ValueError("Invalid email format")
        _check_lengths(name, email)
        if age is not None and age < 0:
            raise ValueError("Age cannot be negative")

        # Early exit only; the unique constraint on m_users.email has the final say
        if self.repo.get_by_email(email) is not None:
            logger.warning("Rejected create: email %s already in use", email)
            raise ValueError(f"User with email {email} already exists")

        user = self.repo.create_user(UserEntity(name=name, email=email, age=age))
        logger.info("Created user id=%s", user.id)
        return user

    def update_user(
        self,
        user_id: int,
        name: str | None = None,
        email: str | None = None,
        age: int | None = None,
    ) -> UserEntity:
        user = self.repo.get_by_id(user_id)
        if user is None:
            raise ValueError(f"User with id {user_id} not found")

        # A rejected update must leave the entity untouched
        if not _is_blank(email):
            if not is_valid_email(email):
                raise ValueError("Invalid email format")
            existing = self.repo.get_by_email(email)
            if existing is not None and existing.id != user_id:
                logger.warning("Rejected update of user id=%s: email %s is taken", user_id, email)
                raise ValueError(f"Email {email} is already taken")
        if age is not None and age < 0:
            raise ValueError("Age cannot be negative")
        _check_lengths(name, email)

        if not _is_blank(name):
            user.name = name
        if not _is_blank(email):
            user.email = email
        if age is not None:
            user.age = age

        user = self.repo.save(user)
        logger.info("Updated user id=%s", user_id)
        return user

    def delete_user(self, user_id: int) -> None:
        if not self.repo.delete_by_id(user_id):
            raise ValueError(f"User with id {user_id} not found")
        logger.info("Deleted user id=%s", user_id)

    def search_users_by_name(self, name: str | None) -> list[UserEntity]:
        if _is_blank(name):
            return self.get_all_users()
        return self.repo.search_by_name(name)

    def get_users_by_age_range(self, min_age: int | None, max_age: int | None) -> list[UserEntity]:
        if min_age is None or max_age is None:
            raise ValueError("Age range cannot be null")
        if min_age < 0 or max_age < 0:
            raise ValueError("Age values cannot be negative")
        if min_age > max_age:
            raise ValueError("Minimum age cannot be greater than maximum age")
        return self.repo.get_by_age_range(min_age, max_age)

    def get_adult_user_count(self) -> int:
        return self.repo.count_by_age_greater_than(ADULT_AGE_THRESHOLD)

    def get_user_statistics(self) -> str:
        total_users = self.repo.count()
        adult_users = self.get_adult_user_count()
        minor_users = total_users - adult_users
        return f"Total Users: {total_users}, Adults (18+): {adult_users}, Minors: {minor_users}"


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))
