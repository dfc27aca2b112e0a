from sqlalchemy.orm import Session
from sqlalchemy.exc import DataError, IntegrityError
from app.domain.entities.UserEntity import UserEntity

class UserRepository:
    """CRUD and query helpers for the m_users table."""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[UserEntity]:
        return self.db.query(UserEntity).order_by(UserEntity.id).all()

    def get_by_id(self, user_id: int) -> UserEntity | None:
        return self.db.get(UserEntity, user_id)

    def get_by_email(self, email: str) -> UserEntity | None:
        return self.db.query(UserEntity).filter(UserEntity.email == email).first()

    def exists_by_id(self, user_id: int) -> bool:
        return self.db.query(UserEntity.id).filter(UserEntity.id == user_id).first() is not None

    def search_by_name(self, fragment: str) -> list[UserEntity]:
        # "%" and "_" in the fragment are matched literally
        return (
            self.db.query(UserEntity)
            .filter(UserEntity.name.icontains(fragment, autoescape=True))
            .order_by(UserEntity.id)
            .all()
        )

    def get_by_age_range(self, min_age: int, max_age: int) -> list[UserEntity]:
        return (
            self.db.query(UserEntity)
            .filter(UserEntity.age.is_not(None), UserEntity.age.between(min_age, max_age))
            .order_by(UserEntity.id)
            .all()
        )

    def count(self) -> int:
        return self.db.query(UserEntity).count()

    def count_by_age_greater_than(self, age: int) -> int:
        return self.db.query(UserEntity).filter(UserEntity.age > age).count()

    def create_user(self, userEntity: UserEntity) -> UserEntity:
        self.db.add(userEntity)
        self._commit(userEntity)
        return userEntity

    def save(self, userEntity: UserEntity) -> UserEntity:
        self._commit(userEntity)
        return userEntity

    def delete_by_id(self, user_id: int) -> bool:
        """Hard delete; returns False when no row has this id."""
        user = self.get_by_id(user_id)
        if user is None:
            return False
        self.db.delete(user)
        self.db.commit()
        return True

    def _commit(self, userEntity: UserEntity):
        email = userEntity.email
        try:
            self.db.commit()
        except IntegrityError as e:
            # the unique index on email is the real guard against concurrent inserts
            self.db.rollback()
            raise ValueError(f"User with email {email} already exists") from e
        except DataError as e:
            # values the column types reject (e.g. over-long strings on MySQL)
            self.db.rollback()
            raise ValueError("User data does not fit the m_users columns") from e
        self.db.refresh(userEntity)
