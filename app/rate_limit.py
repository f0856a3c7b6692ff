"""Per-address request budget applied to every route."""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from app.config import RATE_LIMIT, RATE_LIMITING_ENABLED
from app.logger import get_logger

logger = get_logger(__name__)


def build_limiter(rate_limit: str = RATE_LIMIT, enabled: bool = RATE_LIMITING_ENABLED) -> Limiter:
    return Limiter(key_func=get_remote_address, default_limits=[rate_limit], enabled=enabled)


limiter = build_limiter()


def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded for {get_remote_address(request)}: {exc.detail}")
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests, please try again later."},
    )


def apply_rate_limiter(app: FastAPI) -> None:
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
