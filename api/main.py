import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clients import router as clients_router
from content_ideas import router as content_ideas_router
from core import db, errors, logging_config, settings
from delivery import router as delivery_router
from emails import router as emails_router
from intelligence import router as intelligence_router
from scrapes import router as scrapes_router
from static_site import paths as static_paths
from static_site import router as static_router
from webhooks import router as webhooks_router

load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    logging_config.setup_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    logger.info("api_started origins=%s", ",".join(frontend_origins))
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Client Portal API", lifespan=lifespan)
errors.install_handlers(app)

# Computed once; the allow-list does not change while the process runs.
frontend_origins = settings.frontend_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=frontend_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

api = APIRouter(prefix="/api")


@api.get("/health")
def health(debug: bool = False) -> dict:
    if not debug:
        return {"status": "ok"}

    build = static_paths.resolve_build()
    return {
        "status": "ok",
        "currentDirectory": str(Path.cwd()),
        "hasFrontendBuild": build.found,
        "frontendPath": str(build.directory) if build.directory else None,
        "possiblePaths": [str(p) for p in build.candidates],
    }


api.include_router(clients_router.router, tags=["clients"])
api.include_router(scrapes_router.router, tags=["scrapes"])
api.include_router(intelligence_router.router, tags=["intelligence"])
api.include_router(content_ideas_router.router, tags=["content-ideas"])
api.include_router(delivery_router.router, tags=["delivery"])
api.include_router(emails_router.router, tags=["emails"])
api.include_router(webhooks_router.router, tags=["webhooks"])

app.include_router(api)
app.include_router(static_router.router)


def serve() -> None:
    """
    Console entrypoint: check required config, then run uvicorn.
    """
    logging_config.setup_logging()
    missing = settings.missing_required_env()
    if missing:
        logger.error("Missing required environment variables: %s", ", ".join(missing))
        sys.exit(1)

    uvicorn.run(app, host=settings.host(), port=settings.port())


if __name__ == "__main__":
    serve()
