import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from outreach.config import settings
from outreach.database import Store
from outreach.routers import ai, companies, email, jobs, logs, users
from outreach.routers import settings as settings_router
from outreach.services.user_service import seed_admin

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("outreach")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: connect once and refuse to serve without a store
    owns_store = getattr(app.state, "store", None) is None
    if owns_store:
        store = Store.from_url(settings.database_url)
        try:
            store.ping()
            store.init_schema()
        except SQLAlchemyError:
            logger.exception("Failed to connect to the document store")
            raise
        app.state.store = store
        logger.info("Connected to document store")

    if settings.seed_admin:
        db = app.state.store.session()
        try:
            seed_admin(db)
        except SQLAlchemyError as exc:
            logger.warning("Seeding admin failed: %s", exc)
        finally:
            db.close()
    yield
    if owns_store:
        app.state.store.dispose()
        app.state.store = None


async def _store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Outreach API",
        description="Job and company outreach backend with AI drafting and email delivery",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.store = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)

    app.include_router(jobs.router, prefix=settings.api_prefix)
    app.include_router(companies.router, prefix=settings.api_prefix)
    app.include_router(logs.router, prefix=settings.api_prefix)
    app.include_router(users.router, prefix=settings.api_prefix)
    app.include_router(settings_router.router, prefix=settings.api_prefix)
    app.include_router(ai.router, prefix=settings.api_prefix)
    app.include_router(email.router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": VERSION}

    return app


app = create_app()


def run():
    import uvicorn

    uvicorn.run("outreach.main:app", host=settings.host, port=settings.port)
