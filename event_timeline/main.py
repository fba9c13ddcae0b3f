"""
FastAPI application entry point.

Sets up the app, lifespan (startup checks), CORS, logging, and includes the
API routers. Storage, realtime and billing belong to the hosted backend; this
service only computes layouts, parses imported schedules and summarizes chats.
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from event_timeline.api import messages, timeline
from event_timeline.config import get_settings

# Configure logging - single place for log format and level
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context: runs on startup and shutdown.
    Nothing to connect to; we only sanity-check the auth settings.
    """
    settings = get_settings()
    # Warn if JWT secret looks like a placeholder (causes 401 on every HS256 request)
    secret = settings.supabase_jwt_secret or ""
    if not secret:
        logger.warning("SUPABASE_JWT_SECRET is not set; only RS256/ES256 tokens can be verified.")
    elif len(secret) < 32 or "secret key" in secret.lower() or "your-" in secret.lower():
        logger.warning(
            "SUPABASE_JWT_SECRET looks like a placeholder. Get the real value from: "
            "Supabase Dashboard → Project Settings → API → JWT Secret."
        )
    logger.info("%s started", settings.app_name)
    yield
    logger.info("%s stopped", settings.app_name)


def create_application() -> FastAPI:
    """Factory for the FastAPI app. Keeps main.py clean and testable."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Timeline layout, schedule import and chat summaries for event planning.",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS - allow the web/mobile client to call this API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Restrict in production to your frontend origin
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(timeline.router, prefix="/api/timeline", tags=["timeline"])
    app.include_router(messages.router, prefix="/api/messages", tags=["messages"])

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_application()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
