import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from app.config import ADMIN_PASSWORD, CORS_ORIGINS, UPLOAD_DIR
from app.database import Base, engine, SessionLocal
from app.middleware import add_request_id_and_process_time
from app.rate_limit import apply_rate_limiter
from app.routes.admin_route import admin_router
from app.routes.user_route import user_router
from app.routes.booking_route import booking_router
from app.routes.contact_route import contact_router
from app.routes.pricing_route import pricing_router
from app.services.admin_crud import admin_crud
from app.services.pricing_crud import pricing_crud
from app.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        admin_crud.ensure_admin(db, ADMIN_PASSWORD)
        pricing_crud.seed_defaults(db)
    finally:
        db.close()
    logger.info("Database tables created/verified")
    yield


os.makedirs(UPLOAD_DIR, exist_ok=True)

app = FastAPI(
    title="Eco Collect API",
    version="1.0.0",
    description="API for Eco Collect, a waste pickup booking service: users book pickups with a photo of the waste, admins track bookings, manage pricing and read contact messages.",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
apply_rate_limiter(app)
app.middleware("http")(add_request_id_and_process_time)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "form")]
        errors.append({"field": ".".join(location), "message": error.get("msg")})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Something went wrong"},
    )


@app.get("/", status_code=200)
async def home():
    return {"message": "Welcome to the Eco Collect API"}


app.include_router(admin_router, prefix="/api", tags=["Admin"])
app.include_router(user_router, prefix="/api", tags=["Users"])
app.include_router(booking_router, prefix="/api", tags=["Bookings"])
app.include_router(contact_router, prefix="/api", tags=["Contact"])
app.include_router(pricing_router, prefix="/api", tags=["Pricing"])
app.mount("/uploads", StaticFiles(directory=UPLOAD_DIR), name="uploads")
