import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.api.admin import router as admin_router
from app.api.answers import router as answers_router
from app.api.auth import router as auth_router
from app.api.categories import router as categories_router
from app.api.questions import router as questions_router
from app.config import settings
from app.database import engine, init_db, seed_categories
from app.exceptions import QnAError, UnauthorizedError

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    init_db()
    with Session(engine) as session:
        seed_categories(session, settings.default_categories)
    logger.info(f"Q&A backend started ({settings.environment})")
    yield


app = FastAPI(title="QnA", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(QnAError)
async def qna_error_handler(request: Request, exc: QnAError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(
        f"Store error on {request.method} {request.url.path}", exc_info=exc
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(auth_router, prefix="/api")
app.include_router(questions_router, prefix="/api")
app.include_router(answers_router, prefix="/api")
app.include_router(categories_router, prefix="/api")
app.include_router(admin_router, prefix="/api")


@app.get("/health")
async def health():
    return {"status": "ok"}


# Serve the bundled frontend in production
_frontend_dist = Path(settings.frontend_dist)
if settings.environment == "production" and _frontend_dist.exists():
    if (_frontend_dist / "assets").exists():
        app.mount(
            "/assets", StaticFiles(directory=str(_frontend_dist / "assets")), name="assets"
        )

    @app.get("/{full_path:path}")
    async def serve_spa(request: Request, full_path: str):
        """Serve frontend SPA: all non-API routes return index.html."""
        file_path = (_frontend_dist / full_path).resolve()
        if file_path.is_file() and _frontend_dist.resolve() in file_path.parents:
            return FileResponse(str(file_path))
        return FileResponse(str(_frontend_dist / "index.html"))
