import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.db import MongoStore
from app.errors import register_exception_handlers
from app.logging_config import configure_logging
from app.routers import auth, health, posts, requests

logger = logging.getLogger(__name__)


def create_app(store: MongoStore | None = None) -> FastAPI:
    store = store or MongoStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.connect()
        logger.info("Volunize Hub API starting up")
        yield
        store.close()
        logger.info("Volunize Hub API shutting down")

    app = FastAPI(title="Volunize Hub API", lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # routers
    app.include_router(health.router)       # GET /
    app.include_router(auth.router)         # /jwt, /logout
    app.include_router(posts.router)
    app.include_router(requests.router)
    return app


configure_logging()
app = create_app()


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
