import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recruitme.api.routes import admin, applicant, auth, company, health, jobs
from recruitme.core import config
from recruitme.core.logging_config import sanitize_log_data, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)
    settings = sanitize_log_data({
        "database_url": config.DATABASE_URL,
        "run_migrations": config.RUN_MIGRATIONS,
        "auto_create_tables": config.AUTO_CREATE_TABLES,
        "cors_origins": config.CORS_ORIGINS,
    })
    logger.info(f"Starting with settings: {settings}")

    if config.RUN_MIGRATIONS:
        from recruitme.db.migrate import run_migrations
        run_migrations()
    elif config.AUTO_CREATE_TABLES:
        from recruitme.db.init_db import init_db
        init_db()

    logger.info("RecruitMe API started")
    yield


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="RecruitMe API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(auth.router)
app.include_router(company.router)
app.include_router(applicant.router)
app.include_router(jobs.router)
app.include_router(admin.router)
app.include_router(health.router)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Last resort for anything a route did not turn into an HTTP error."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# ============================================
# ✅ HEALTH CHECK ROOT ENDPOINT
# ============================================

@app.get("/")
def root():
    return {"status": "RecruitMe API running"}
