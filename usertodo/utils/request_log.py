import logging
from datetime import datetime, UTC

from fastapi import Request

from usertodo.utils.timestamps import iso_utc

logger = logging.getLogger("usertodo")


def configure_logging(level: str = "INFO") -> None:
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)


async def log_requests(request: Request, call_next):
    logger.info("%s %s - %s", request.method, request.url.path, iso_utc(datetime.now(UTC)))
    return await call_next(request)
