import logging
from fastapi import Response, status
from fastapi.responses import PlainTextResponse
from app.domain.services.user_service import UserService
from app.api.validators.user_validator import UserCreateRequest, UserUpdateRequest
from app.domain.response.custom_response import bad_request_response, not_found_response

logger = logging.getLogger(__name__)

# Controllers turn UserService results and ValueErrors into HTTP responses.
# Routes only declare paths and parameters.

def list_users_controller(service: UserService):
    return service.get_all_users()

def get_user_by_id_controller(user_id: int, service: UserService):
    user = service.get_user_by_id(user_id)
    if user is None:
        return not_found_response(f"User with id {user_id} not found")
    return user

def get_user_by_email_controller(email: str, service: UserService):
    try:
        user = service.get_user_by_email(email)
    except ValueError as e:
        return bad_request_response(str(e))
    if user is None:
        return not_found_response(f"User with email {email} not found")
    return user

def create_user_controller(data: UserCreateRequest, service: UserService):
    try:
        return service.create_user(data.name, data.email, data.age)
    except ValueError as e:
        return bad_request_response(str(e))

def update_user_controller(user_id: int, data: UserUpdateRequest, service: UserService):
    # Unknown ids are reported as 400 here, unlike get/delete which answer 404
    try:
        return service.update_user(user_id, data.name, data.email, data.age)
    except ValueError as e:
        return bad_request_response(str(e))

def delete_user_controller(user_id: int, service: UserService):
    try:
        service.delete_user(user_id)
    except ValueError as e:
        return not_found_response(str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

def search_users_controller(name: str | None, service: UserService):
    return service.search_users_by_name(name)

def users_by_age_range_controller(min_age: int | None, max_age: int | None, service: UserService):
    try:
        return service.get_users_by_age_range(min_age, max_age)
    except ValueError as e:
        logger.warning("Rejected age range [%s, %s]: %s", min_age, max_age, e)
        return bad_request_response(str(e))

def user_statistics_controller(service: UserService):
    return PlainTextResponse(service.get_user_statistics())

def adult_user_count_controller(service: UserService):
    return service.get_adult_user_count()
