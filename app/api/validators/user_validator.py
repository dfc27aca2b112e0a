from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

# Largest value an INT column accepts on MySQL; also bounds ids and query params
MAX_INT = 2**31 - 1

# name/email are optional here so missing fields are rejected by UserService with a 400.
# age has no lower bound so negatives get the service's "Age cannot be negative" message.
class UserCreateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = Field(default=None, le=MAX_INT)

class UserUpdateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = Field(default=None, le=MAX_INT)

class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    age: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)  # build directly from UserEntity
