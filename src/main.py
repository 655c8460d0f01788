"""FastAPI application serving the games catalog."""

import logging

from fastapi import FastAPI

from src.api.errors import register_error_handlers
from src.api.router import router as games_router
from src.core.config import get_settings


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Games Catalog",
        version="0.1.0",
        description="CRUD endpoint for a JSON-backed catalog of games.",
    )
    register_error_handlers(app)
    app.include_router(games_router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host="0.0.0.0", port=8000, reload=True)
