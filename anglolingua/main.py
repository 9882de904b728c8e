import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from anglolingua import config
from anglolingua.context import SessionContext, create_context
from anglolingua.errors import AngloLinguaError, ValidationFailure
from anglolingua.routes.conversation import router as conversation_router
from anglolingua.routes.lessons import router as lessons_router
from anglolingua.routes.paywall import router as paywall_router
from anglolingua.routes.session import router as session_router

logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)


async def domain_error_handler(request: Request, exc: AngloLinguaError) -> JSONResponse:
    """Translate domain errors into recoverable JSON responses."""
    body = {"error": str(exc), "type": type(exc).__name__}
    if exc.redirect:
        body["redirect"] = exc.redirect
    if isinstance(exc, ValidationFailure):
        body["missing_fields"] = exc.missing_fields
    return JSONResponse(status_code=exc.status_code, content=body)


def create_app(context: SessionContext | None = None) -> FastAPI:
    """Build the API around an explicit session context."""
    ctx = context if context is not None else create_context()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await ctx.start()
        logger.info(
            "AngloLingua started: %d lessons, authenticated=%s, mock_mode=%s",
            len(ctx.catalog.list_lessons()), ctx.is_authenticated, ctx.chat_service.mock_mode,
        )
        yield

    app = FastAPI(
        title="AngloLingua",
        description="English lessons, homework and AI conversation practice for Polish speakers",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.context = ctx

    # CORS middleware: allow frontend dev server origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AngloLinguaError, domain_error_handler)

    @app.get("/health", response_class=PlainTextResponse)
    async def health_check():
        """Health check endpoint."""
        return "OK"

    app.include_router(session_router)
    app.include_router(lessons_router)
    app.include_router(paywall_router)
    app.include_router(conversation_router)
    return app


app = create_app()
