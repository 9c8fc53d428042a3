# fitclub_server/main.py

import os
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from fitclub_server.api import admin, auth, content, progress, users
from fitclub_server.config import Settings, load_settings
from fitclub_server.core.errors import register_error_handlers
from fitclub_server.database import Database, init_db


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Builds the API application.
    Tables are created and seeded once, here, before any request is served.
    """
    settings = settings or load_settings()
    db = Database(settings.database_url)
    init_db(db, settings)

    app = FastAPI(title="KEL FitClub API")
    app.state.settings = settings
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/api/health")
    def health(request: Request):
        try:
            with request.app.state.db.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            database = True
        except SQLAlchemyError:
            database = False
        return {"status": "ok", "database": database, "env": settings.app_env}

    app.include_router(auth.router)
    app.include_router(content.router)
    app.include_router(progress.router)
    app.include_router(users.router)
    app.include_router(admin.router)

    return app


def run():
    uvicorn.run(
        "fitclub_server.main:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
