from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from app.core.database import Base

NAME_MAX_LENGTH = 150
EMAIL_MAX_LENGTH = 254

class UserEntity(Base):

    __tablename__ = "m_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    email = Column(String(EMAIL_MAX_LENGTH), nullable=False, unique=True)
    age = Column(Integer, nullable=True)
    create_datetime = Column(DateTime, default=datetime.now)
    update_datetime = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    __table_args__ = (
        CheckConstraint("age IS NULL OR age >= 0", name="ck_m_users_age_non_negative"),
    )

    def __repr__(self):
        return f"<UserEntity id={self.id} email={self.email!r}>"
