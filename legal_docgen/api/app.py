"""FastAPI application factory"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from legal_docgen import __version__
from legal_docgen.api.routes.documents import router as documents_router
from legal_docgen.api.schemas import HealthResponse
from legal_docgen.services.engine import LegalDocumentEngine
from legal_docgen.services.registry import build_default_registry
from legal_docgen.utils.config import Settings, get_settings


def create_app(
    engine: Optional[LegalDocumentEngine] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure the FastAPI application"""
    settings = settings or get_settings()
    if engine is None:
        engine = LegalDocumentEngine(build_default_registry(settings))

    app = FastAPI(
        title=settings.api_title,
        description="Génération de documents juridiques français par questions successives",
        version=__version__,
    )
    app.state.engine = engine

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(documents_router)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(
            status="ok",
            version=__version__,
            templates=len(app.state.engine.registry),
        )

    return app
