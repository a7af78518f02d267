# api/server.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes.chat import router as chat_router
from api.routes.planned import router as planned_router
from api.sessions import RouteStore, SessionStore
from assistant.common.config import settings

logger = logging.getLogger("api.server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level.upper())
    # stan rozmów trzymamy per proces, każda sesja osobno
    app.state.sessions = SessionStore(max_sessions=settings.session_max)
    app.state.routes = RouteStore()
    logger.info("SessionStore ready (max_sessions=%d)", settings.session_max)
    try:
        yield
    finally:
        logger.info("Dropping %d conversation sessions", len(app.state.sessions))


app = FastAPI(lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(chat_router)
app.include_router(planned_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
