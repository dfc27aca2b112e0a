from fastapi.responses import JSONResponse

def custom_error_response(status_code: int = 400, message: str = ""):
    """
    Standard error body for the users API: {"status_code": ..., "message": ...}
    """
    return JSONResponse(
        status_code=status_code,
        content={
            "status_code": status_code,
            "message": message
        }
    )

def bad_request_response(message: str):
    return custom_error_response(400, message)

def not_found_response(message: str):
    return custom_error_response(404, message)
