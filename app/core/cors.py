from fastapi.middleware.cors import CORSMiddleware
from app.core.config import CORS_ORIGINS

def setup_cors(app, env: str = "development"):
    """
    Set up CORS for the FastAPI application
    :param app: FastAPI instance
    :param env: current environment (development | production)
    """
    if CORS_ORIGINS:
        origins = CORS_ORIGINS
    elif env == "development":
        origins = [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]
    else:
        origins = []

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
