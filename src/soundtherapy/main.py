import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

import soundtherapy.models  # noqa: F401 — register all models with Base.metadata
from soundtherapy.api.routes.model import router as model_router
from soundtherapy.api.routes.modes import router as modes_router
from soundtherapy.api.routes.recommendations import router as recommendations_router
from soundtherapy.api.routes.sessions import router as sessions_router
from soundtherapy.api.routes.wearable import router as wearable_router
from soundtherapy.config import get_settings
from soundtherapy.database import Base, engine
from soundtherapy.schemas.system import StatusResponse
from soundtherapy.therapy.predictor import get_model_loader


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Create tables on startup (dev convenience)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    # Recommendations work before and without the model; a failed load is logged.
    await get_model_loader().load()
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app = FastAPI(
        title="SoundTherapy",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.include_router(modes_router)
    app.include_router(recommendations_router)
    app.include_router(sessions_router)
    app.include_router(wearable_router)
    app.include_router(model_router)

    @app.get("/api/system/status", response_model=StatusResponse)
    async def system_status() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
