"""Eventmi - FastAPI Entry Point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from .config import LOG_LEVEL, LOG_FORMAT, ROOT_PATH, STATIC_DIR
from .database import init_db, close_db
from .errors import setup_error_handling
from .infrastructure.database import close_async_db
from .middleware import RequestLoggingMiddleware
from .routes import events_router

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: runs before the application starts accepting requests
    init_db()
    close_db()
    logger.info("Eventmi started")
    yield
    # Shutdown: release pooled async read-back connections
    await close_async_db()


app = FastAPI(title="Eventmi", lifespan=lifespan)

app.add_middleware(RequestLoggingMiddleware)

setup_error_handling(app)

# Static files
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

app.include_router(events_router)


@app.get("/")
def home():
    """Home page is the event list."""
    return RedirectResponse(url=f"{ROOT_PATH}/Event/All", status_code=302)
