import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from jobboard.config import settings
from jobboard.core.errors import AppError, ErrorKind
from jobboard.database import dispose_db, engine, init_db
from jobboard.logging_config import setup_logging
from jobboard.routers import auth, companies, positions, skills, societies

setup_logging()
logger = logging.getLogger(__name__)

PLACEHOLDER_SECRET = "replace-with-a-long-random-secret-key"

app = FastAPI(
    title="Job Board API",
    description="Employer and job-seeker accounts, positions and applications.",
    version="1.0.0",
)

cors_origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(companies.router)
app.include_router(societies.router)
app.include_router(positions.router)
app.include_router(skills.router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.kind == ErrorKind.UPSTREAM_FAILURE:
        logger.error("Upstream failure on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    messages = []
    for err in exc.errors():
        # Drop the "body"/"query" prefix so locations read like field names
        loc = ".".join(str(p) for p in err.get("loc", ())[1:])
        messages.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=400,
        content={"detail": "; ".join(messages) or "Invalid input", "error": ErrorKind.VALIDATION.value},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error": ErrorKind.UPSTREAM_FAILURE.value},
    )


@app.get("/health/live")
def health_live():
    return {"status": "ok"}


@app.get("/health/ready")
def health_ready():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "ready"}
    except Exception:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "not_ready"})


@app.on_event("startup")
def on_startup():
    logger.info("Starting Job Board API")
    env = (settings.app_env or "development").lower()
    if settings.secret_key == PLACEHOLDER_SECRET:
        if env in {"production", "prod"}:
            raise RuntimeError("SECRET_KEY placeholder is not allowed in production")
        logger.warning("SECRET_KEY is using placeholder default. Set SECRET_KEY in .env for secure deployments.")
    init_db()


@app.on_event("shutdown")
def on_shutdown():
    logger.info("Stopping Job Board API")
    dispose_db()


@app.get("/")
def root():
    return {"message": "Job Board API. See /docs for the available endpoints."}
