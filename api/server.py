"""FastAPI Server - Spend Dashboard Gateway"""

import sys
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from datetime import datetime

sys.path.insert(0, str(Path(__file__).parent.parent))

from modules.shared import app_logger, log_service, ensure_schema, close_all_engines
from modules.shared.config import is_development
from modules.shared.connectors.ga4 import ga4_client_provider
from modules.shared.errors import ValidationError
from modules.dashboard import get_router as get_dashboard_router
from modules.spend_reader import get_router as get_spend_reader_router


# Lifespan Context Manager (moderner als @app.on_event)
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup und Shutdown Events"""

    try:
        ensure_schema()
    except Exception as e:
        app_logger.error(f"Fehler beim Anlegen des DB-Schemas: {e}", exc_info=True)
        raise

    yield

    ga4_client_provider.reset()
    close_all_engines()


def create_app() -> FastAPI:
    """App Factory (Tests erzeugen eigene Instanzen)"""
    app = FastAPI(
        title="Spend Dashboard",
        version="1.0.0",
        lifespan=lifespan
    )

    # CORS aktivieren (für localhost Entwicklung)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ===== ERROR HANDLING =====

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.error, "message": exc.message},
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        app_logger.error(f"Unerwarteter Fehler bei {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": str(exc) if is_development() else "Internal server error",
            },
        )

    # ===== MODULE ROUTER =====

    app.include_router(get_dashboard_router(), prefix="/api/dashboard", tags=["dashboard"])
    app.include_router(get_spend_reader_router(), prefix="/api/upload", tags=["upload"])

    # ===== GATEWAY ENDPOINTS =====

    @app.get("/api/health")
    async def health():
        """Health Check"""
        return {
            "status": "ok",
            "timestamp": datetime.now().isoformat(),
            "analytics_client": "initialized" if ga4_client_provider.is_initialized else "lazy",
        }

    @app.get("/api/logs")
    def get_logs(job_id: str = None, level: str = None, limit: int = 100, offset: int = 0):
        """Hole Logs mit Filtern"""
        return log_service.get_logs(job_id, level, limit, offset)

    @app.post("/api/logs/cleanup")
    def cleanup_logs(days: int = 30):
        """Lösche alte Logs"""
        deleted = log_service.cleanup_old_logs(days)
        return {"status": "ok", "deleted": deleted}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
