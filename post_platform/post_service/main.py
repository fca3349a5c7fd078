"""
Post Service - posts CRUD over JSON and server-rendered pages
"""
from contextlib import asynccontextmanager
from pathlib import Path
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .config import settings
from .db import init_db
from .routes import accounts, api, health, pages

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Apply pending migrations on startup"""
    init_db()
    yield


app = FastAPI(
    title="Post Service",
    description="Posts CRUD over a JSON API and HTML pages",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/hello/", response_class=PlainTextResponse)
def hello():
    return "Hello, World!"


app.include_router(health.router)
app.include_router(accounts.router)
app.include_router(api.router)

if Path(settings.STATIC_DIR).is_dir():
    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")
else:
    logger.warning("Static directory %s not found; /static is not served", settings.STATIC_DIR)

# Pages last; "/{post_id}" is the most generic route
app.include_router(pages.router)


def run() -> None:
    """Console entry point: serve the app on HOST:PORT."""
    import uvicorn

    logger.info("Starting post service on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
