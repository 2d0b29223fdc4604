from fastapi import Request
import logging
import time

logger = logging.getLogger(__name__)

# Paths that are too noisy to log on every hit
QUIET_PATHS = [
    "/health",
    "/docs",
    "/openapi.json",
    "/redoc",
]


async def log_requests_middleware(request: Request, call_next):
    """
    Middleware that logs method, path, status code and duration of each request.
    Failures are noted and re-raised; the error handlers log the traceback.
    """
    if any(request.url.path.startswith(path) for path in QUIET_PATHS):
        return await call_next(request)

    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.error(f"{request.method} {request.url.path} failed after {elapsed_ms:.1f}ms")
        raise

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
    )
    return response
