import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO"):
    """Configure the root logger once for the API process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    # uvicorn already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
