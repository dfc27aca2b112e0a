import logging
from fastapi import FastAPI, APIRouter
from fastapi.exceptions import RequestValidationError
from app.core.config import APP_ENV, APP_NAME, API_PREFIX, LOG_LEVEL
from app.core.validation_handler import ValidationHandler
from app.core.cors import setup_cors
from app.core.logger import setup_logging

# Routers
from app.api.routes import user_route

setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=APP_NAME)

setup_cors(app, env=APP_ENV)
app.add_exception_handler(RequestValidationError, ValidationHandler)

# "Master" router, so a deployment can mount everything under API_PREFIX
api_router = APIRouter(prefix=API_PREFIX)

api_router.include_router(user_route.router)

app.include_router(api_router)

logger.info("%s configured (env=%s, prefix=%r)", APP_NAME, APP_ENV, API_PREFIX)

@app.get("/")
async def root():
    return {"message": f"{APP_NAME} backend is running"}
