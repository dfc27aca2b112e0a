import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

logger = logging.getLogger(__name__)

async def ValidationHandler(request: Request, exc: RequestValidationError):
    """
    Schema failures (non-integer id, out-of-range number, wrong JSON type) are
    answered with 400, the same status as any other invalid user input.
    """
    errors = [
        {"field": ".".join(str(loc) for loc in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]
    logger.warning("Invalid request %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "code": 400,
            "message": "Validation Error",
            "errors": errors
        }
    )
