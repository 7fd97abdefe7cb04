# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.checklist.routes import router as checklist_router
from app.core.config import Settings, get_settings
from app.core.database import Base, build_engine, build_session_factory
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.ticket.routes import router as ticket_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logger = configure_logging(settings)

    engine = build_engine(settings.DATABASE_URL)
    Base.metadata.create_all(bind=engine)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESC,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Routers
    app.include_router(ticket_router)
    app.include_router(checklist_router)

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok"}

    logger.info("%s %s ready on %s", settings.APP_NAME, settings.APP_VERSION, engine.url.render_as_string())
    return app


app = create_app()
