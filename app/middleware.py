from time import perf_counter
from uuid import uuid4
from fastapi import Request
from app.logger import get_logger

logger = get_logger(__name__)


async def add_request_id_and_process_time(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid4())
    start = perf_counter()
    response = await call_next(request)
    duration_ms = (perf_counter() - start) * 1000

    response.headers["X-Request-ID"] = request_id
    response.headers["X-Process-Time"] = f"{duration_ms:.2f}ms"

    client_ip = request.client.host if request.client else "unknown"
    logger.info(
        f"{request.method} {request.url.path} | status={response.status_code} "
        f"| client={client_ip} | request_id={request_id} | duration={duration_ms:.2f}ms"
    )
    return response
