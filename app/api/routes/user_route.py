from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status
from app.api.controllers.user_controller import (
    list_users_controller,
    get_user_by_id_controller,
    get_user_by_email_controller,
    create_user_controller,
    update_user_controller,
    delete_user_controller,
    search_users_controller,
    users_by_age_range_controller,
    user_statistics_controller,
    adult_user_count_controller,
)
from app.api.validators.user_validator import MAX_INT, UserCreateRequest, UserUpdateRequest, UserResponse
from app.domain.services.user_service import UserService, get_user_service

router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
    responses={404: {"description": "Not found"}},
)

# Fixed sub-paths must be registered before /{user_id}

@router.get("", response_model=list[UserResponse], summary="List all users")
def list_users(service: UserService = Depends(get_user_service)):
    return list_users_controller(service)

@router.get("/search", response_model=list[UserResponse], summary="Search users by name")
def search_users(name: Optional[str] = None, service: UserService = Depends(get_user_service)):
    return search_users_controller(name, service)

@router.get("/age-range", response_model=list[UserResponse], summary="Users within an age range")
def users_by_age_range(
    min_age: Optional[int] = Query(None, alias="minAge", le=MAX_INT),
    max_age: Optional[int] = Query(None, alias="maxAge", le=MAX_INT),
    service: UserService = Depends(get_user_service),
):
    return users_by_age_range_controller(min_age, max_age, service)

@router.get("/statistics", summary="User statistics as plain text")
def user_statistics(service: UserService = Depends(get_user_service)):
    return user_statistics_controller(service)

@router.get("/adults/count", response_model=int, summary="Number of users aged 18 or over")
def adult_user_count(service: UserService = Depends(get_user_service)):
    return adult_user_count_controller(service)

@router.get("/email/{email}", response_model=UserResponse, summary="Get a user by email")
def get_user_by_email(email: str, service: UserService = Depends(get_user_service)):
    return get_user_by_email_controller(email, service)

@router.get("/{user_id}", response_model=UserResponse, summary="Get a user by id")
def get_user(user_id: int = Path(le=MAX_INT), service: UserService = Depends(get_user_service)):
    return get_user_by_id_controller(user_id, service)

@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED, summary="Create a user")
def create_user(data: UserCreateRequest, service: UserService = Depends(get_user_service)):
    return create_user_controller(data, service)

@router.put("/{user_id}", response_model=UserResponse, summary="Update a user")
def update_user(data: UserUpdateRequest, user_id: int = Path(le=MAX_INT), service: UserService = Depends(get_user_service)):
    return update_user_controller(user_id, data, service)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a user")
def delete_user(user_id: int = Path(le=MAX_INT), service: UserService = Depends(get_user_service)):
    return delete_user_controller(user_id, service)
